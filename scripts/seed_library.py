"""Create the record tables and seed the protocol/reference library.

Usage:
    python scripts/seed_library.py [--drop]
"""

import argparse
import asyncio

from medassess.core.logging import setup_logging
from medassess.db.init_db import drop_tables, init_db
from medassess.db.session import AsyncSessionLocal, engine


async def run(drop: bool) -> None:
    if drop:
        await drop_tables(engine)

    async with AsyncSessionLocal() as session:
        await init_db(engine, session)

    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the MedAssess record store")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop all tables before seeding",
    )
    args = parser.parse_args()

    setup_logging()
    asyncio.run(run(args.drop))

    print("=" * 60)
    print("LIBRARY SEED COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
