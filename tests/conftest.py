import os

# Keep tests offline-safe: no real Custom Vision settings leak in from the shell or a .env file.
for _name in ("AZURE_PREDICTION_KEY", "AZURE_ENDPOINT", "AZURE_PROJECT_ID", "AZURE_ITERATION_NAME"):
    os.environ[_name] = ""
os.environ["LOG_JSON"] = "false"
