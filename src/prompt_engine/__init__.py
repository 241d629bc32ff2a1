# Prompt Engine
"""
Prompt generation and persistence modules:
- template_engine: {token} templates and Jinja2 guide documents
- content_writer: article-creation prompt composition
- article_modifier: modification prompt dispatch
- publisher: setup/create/modify pipeline writing to the workspace
"""
