# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASK_TRACKER_DATA_DIR": "Local data directory for the log file (default: .local/task_tracker).",
    # Registry
    "TASK_TRACKER_MAX_TASKS": "Maximum number of tasks the registry holds (default: 1000).",
    # Console
    "TASK_TRACKER_CONSOLE_ENABLED": "Run the console front end (true/false).",
    "TASK_TRACKER_CALLER": "Initial caller identity for the console (default: local).",
}
