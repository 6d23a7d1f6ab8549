"""
Core: parse a line, apply it to the task list, format the result.

- parser.py: Keyword, Command, CommandParser
- engine.py: TaskEngine (owns the task list)
- outcomes.py / errors.py: results and hard failures
- formatter.py: outcome -> text
- chat.py: transport-agnostic respond() used by connectors
"""
