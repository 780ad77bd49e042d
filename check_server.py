#!/usr/bin/env python3
"""Smoke checks against a running backend instance."""
import aiohttp
import asyncio
import logging
import os
from typing import Optional


BASE_URL = f"http://localhost:{os.getenv('PORT') or 3000}"

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


async def check_endpoint(session: aiohttp.ClientSession, method: str, path: str,
                         expected_status: int, expected_body: Optional[dict] = None) -> bool:
    logger.info(f"Checking {method} {path}")
    async with session.request(method, f"{BASE_URL}{path}") as response:
        if response.status != expected_status:
            logger.error(f"{method} {path} returned {response.status}, expected {expected_status}")
            return False

        if response.headers.get("Access-Control-Allow-Origin") != "*":
            logger.error(f"{method} {path} is missing the cross-origin header")
            return False

        if expected_body is not None:
            data = await response.json()
            if data != expected_body:
                logger.error(f"{method} {path} returned {data}, expected {expected_body}")
                return False

        logger.info(f"{method} {path} passed")
        return True

async def run_checks() -> bool:
    """Run all endpoint checks and return success status."""
    logger.info(f"Starting backend checks against {BASE_URL}")

    checks = [
        ("GET", "/api", 200, {"message": "Backend API running on EKS"}),
        ("GET", "/health", 200, {"status": "healthy"}),
        ("POST", "/api", 404, None),
        ("GET", "/unknown", 404, None),
    ]

    async with aiohttp.ClientSession() as session:
        results = [await check_endpoint(session, *check) for check in checks]

    if all(results):
        logger.info("All checks completed successfully")
    return all(results)

def main() -> None:
    """Main entry point."""
    try:
        success = asyncio.run(run_checks())
        exit(0 if success else 1)
    except KeyboardInterrupt:
        logger.warning("Checks interrupted by user")
        exit(130)
    except aiohttp.ClientError as e:
        logger.error(f"Could not reach backend: {e}")
        exit(1)

if __name__ == "__main__":
    main()
