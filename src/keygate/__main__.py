"""Run the keygate gateway: python -m keygate"""

import logging

import uvicorn

from keygate.config import load_config

config = load_config()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
uvicorn.run("keygate.app:create_app", host=config.host, port=config.port, factory=True)
