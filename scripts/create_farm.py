#!/usr/bin/env python3
"""
Script to register a farm so the API can be scoped to it.

Usage:
  python scripts/create_farm.py --name "Fazenda Boa Vista" [--repro-mode ESTACAO] [--farm-id UUID]

The printed farm id is the value to send in the farm header.
"""

import asyncio
import sys
from pathlib import Path
from uuid import UUID

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import AppError
from src.application.use_cases.farms import create_farm
from src.config.settings import get_settings
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def register_farm(name: str, repro_mode: str, farm_id: UUID | None = None) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            farm = await create_farm.execute(
                uow,
                create_farm.CreateFarmInput(name=name, repro_mode=repro_mode, farm_id=farm_id),
            )
            await uow.commit()

        print("\n✅ Farm created successfully!")
        print(f"   Farm ID: {farm.id}")
        print(f"   Name: {farm.name}")
        print(f"   Repro mode: {farm.repro_mode.value}")
        print(f"\n   Send it as: {settings.farm_header}: {farm.id}")
    except AppError as exc:
        print(f"\n❌ Error creating farm: {exc.message}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Register a farm")
    parser.add_argument("--name", required=True, help="Farm name")
    parser.add_argument(
        "--repro-mode",
        default="CONTINUO",
        help="CONTINUO (year-round) or ESTACAO (breeding seasons)",
    )
    parser.add_argument("--farm-id", help="Farm ID (optional, auto-generated)")

    args = parser.parse_args()

    farm_uuid = None
    if args.farm_id:
        try:
            farm_uuid = UUID(args.farm_id)
        except ValueError:
            print(f"❌ Error: '{args.farm_id}' is not a valid UUID")
            sys.exit(1)

    asyncio.run(register_farm(args.name, args.repro_mode, farm_uuid))
