"""
CreditScore Deployment
Deploys the CreditScore contract to Sepolia and prints its address
"""

import asyncio
import os
import sys
from loguru import logger
from dotenv import load_dotenv

from runner.deploy_runner import DeployRunner

load_dotenv()


def setup_logging():
    """Configure stderr and file log sinks"""
    level = os.getenv('LOG_LEVEL', 'INFO').upper()

    try:
        logger.level(level)
    except ValueError:
        invalid_level, level = level, 'INFO'
    else:
        invalid_level = None

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )
    logger.add(
        "data/logs/deploy.log",
        rotation="1 day",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        level="DEBUG"
    )

    if invalid_level:
        logger.warning(f"Unknown LOG_LEVEL '{invalid_level}', using INFO")


async def main() -> int:
    """Main entry point"""
    runner = DeployRunner()
    return await runner.run()


def cli():
    setup_logging()
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
