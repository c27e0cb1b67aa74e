"""Default settings for the Gett client."""

import os


API_URL = os.environ.get("GETT_API_URL", "https://open.ge.tt/1")

REQUEST_TIMEOUT = float(os.environ.get("GETT_TIMEOUT", "30"))

LOGIN_ENDPOINT = "/users/login"
