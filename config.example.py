# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "SAITAMA_APP_NAME": "Name shown in front of replies (default: Saitama).",
    "SAITAMA_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Persistence
    "SAITAMA_SAVE_TASKS": "Load and save the task list (true/false, default: true).",
    "SAITAMA_DATA_DIR": "Local data directory for the database and logs (default: .local/saitama).",
    "SAITAMA_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Commands
    "SAITAMA_COMMAND_ALIASES": (
        "Extra command names, e.g. 'ls=list, rm=delete, t=todo'. Aliases never replace a built-in."
    ),
}
