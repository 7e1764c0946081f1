from typing import List, Optional
import asyncio
import logging
import sys
import os
import dotenv

from openmusic.exceptions import OpenMusicError
from openmusic.utils import AppParams, extract_app_params, init_logger
from openmusic.cli import CLIOrchestrator

logger = logging.getLogger(__name__)

async def main(argv: Optional[List[str]] = None) -> int:
    dotenv.load_dotenv()

    app_params: AppParams = extract_app_params(os.getenv("OPENMUSIC_CONFIG"))

    if app_params.log_enabled:
        init_logger(app_params.log_filepath, app_params.log_level, app_params.db_echo)

    cli_orchestrator = CLIOrchestrator(app_params)
    try:
        await cli_orchestrator.run(argv)
    except OpenMusicError as e:
        logger.info(f"Command failed with {type(e).__name__}: {e.message}")
        print(f"error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1

    return 0

def openmusic():
    sys.exit(asyncio.run(main()))

if __name__ == "__main__":
    openmusic()
