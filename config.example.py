# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKLIST_LOG_TO_FILE": "Write full logs to <data_dir>/tasklist.log (true/false, default: true).",
    # Storage
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_STORAGE_BACKEND": "sqlite | json | memory (default: sqlite).",
    "TASKLIST_STORAGE_PATH": (
        "Storage file (default: <data_dir>/tasklist.sqlite3, or tasklist.json for json)."
    ),
    "TASKLIST_STORAGE_KEY": "Key holding the task snapshot (default: esgTaskListApp).",
}
