#!/usr/bin/env python3
"""
Database Reset Script
Drop every table and rebuild the schema through Alembic

Usage:
    python -m script.reset_database

Notes:
- This script only resets database structure, does not seed flights
- To seed flights, run `python -m script.seed_flights`
"""

import asyncio
import subprocess
import sys

from sqlalchemy import text

from src.platform.constant.path import BASE_DIR
from src.platform.database.orm_db_setting import dispose_engine, drop_db_tables, get_engine


async def _drop_all() -> None:
    await drop_db_tables()
    async with get_engine().begin() as conn:
        await conn.execute(text('DROP TABLE IF EXISTS alembic_version'))
    await dispose_engine()


def _run_alembic_migrations() -> None:
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


async def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        print('🗑️  Dropping tables...')
        await _drop_all()
        print('🏗️  Running database migrations...')
        _run_alembic_migrations()

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed flights, run: python -m script.seed_flights')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        sys.exit(1)


if __name__ == '__main__':
    asyncio.run(main())
