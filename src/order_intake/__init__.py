# Order Intake
"""
Order workbook intake:
- excel_analyzer: order spreadsheet to ContentPlan extraction
"""
