#!/usr/bin/env python
"""
Seat Selection Server Launcher

Starts the API under granian, as the deployment does:
    granian src.main:app --interface asgi --host <host> --port <port> --workers <n>

Usage (from the project root):
    python -m script.run_server
"""

import os

from src.platform.config.core_setting import Settings, settings
from src.platform.logging.loguru_io import Logger


APP_TARGET = 'src.main:app'


def build_command(config: Settings) -> list[str]:
    return [
        'granian',
        APP_TARGET,
        '--interface',
        'asgi',
        '--host',
        config.SERVER_HOST,
        '--port',
        str(config.SERVER_PORT),
        '--workers',
        str(config.SERVER_WORKERS),
    ]


def main() -> None:
    command = build_command(settings)
    Logger.base.info(f'[Seat Selection] Launching: {" ".join(command)}')
    # Replace this process so signals reach granian directly
    os.execvp(command[0], command)


if __name__ == '__main__':
    main()
