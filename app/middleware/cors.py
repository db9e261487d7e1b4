from fastapi.middleware.cors import CORSMiddleware
from app.config.environments import ALLOWED_ORIGINS


def add_cors(application):
    # browsers reject a wildcard origin on credentialed requests, so "*" is matched by regex instead
    wildcard = "*" in ALLOWED_ORIGINS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[] if wildcard else ALLOWED_ORIGINS,
        allow_origin_regex=".*" if wildcard else None,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
