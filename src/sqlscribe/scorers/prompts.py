"""
Judge instructions and prompt templates for the three scorers.

Templates use ``str.format`` placeholders; literal braces in the JSON
examples are doubled.
"""

CORRECTNESS_INSTRUCTIONS = (
    "You are an expert SQL reviewer. Evaluate the SQL query for syntax "
    "correctness, best practices, and potential security issues. "
    "Check for proper use of keywords, appropriate WHERE clauses, avoidance of "
    "SELECT *, and security vulnerabilities. "
    "Return only structured JSON matching the provided schema."
)

CORRECTNESS_PROMPT = '''
Evaluate this SQL query:
"""
{sql}
"""

Check for:
1. Syntax correctness (proper SQL keywords, structure)
2. Best practices (explicit column names, appropriate WHERE clauses, JOIN syntax)
3. Security issues (SQL injection vulnerabilities, missing WHERE in UPDATE/DELETE)

Return JSON with:
{{
  "isSyntacticallyCorrect": boolean,
  "hasBestPractices": boolean,
  "securityIssues": string[],
  "confidence": number,
  "feedback": string
}}
'''

INTENT_MATCH_INSTRUCTIONS = (
    "You are an expert at understanding user intent and matching it to SQL "
    "operations. Determine if the generated SQL query correctly addresses what "
    "the user asked for. "
    "Return only structured JSON matching the provided schema."
)

INTENT_MATCH_PROMPT = '''
User asked:
"""
{user_text}
"""

Generated SQL:
"""
{sql}
"""

Determine if the SQL correctly addresses the user's request. Consider:
- Does the operation type match (SELECT, INSERT, UPDATE, DELETE)?
- Are the right tables/columns targeted?
- Does it accomplish what the user wants?

Return JSON with:
{{
  "matchesIntent": boolean,
  "confidence": number,
  "reasoning": string
}}
'''

READABILITY_INSTRUCTIONS = (
    "You are an expert at SQL code quality and readability. "
    "Evaluate if the SQL is well-formatted, properly indented, and includes "
    "helpful comments. "
    "Return only structured JSON matching the provided schema."
)

READABILITY_PROMPT = '''
Evaluate the formatting and readability of this SQL:
"""
{sql}
"""

Check for:
1. Proper line breaks and formatting
2. Indentation
3. Uppercase keywords
4. Comments for complex logic
5. Table aliases in JOINs

Return JSON with:
{{
  "isFormatted": boolean,
  "hasComments": boolean,
  "readabilityScore": number,
  "suggestions": string[]
}}
'''
