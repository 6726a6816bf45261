"""Maintenance commands run against the configured store.

``seed-catalog catalog.yaml`` loads products (and optionally their admin owner)
from a YAML file. ``make-admin someone@example.com`` promotes an existing account.
"""

import argparse
import sys
from pathlib import Path

import yaml

from storefront_api.core.application.exceptions import ApplicationError
from storefront_api.infrastructure.configuration.main_settings import get_settings
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from storefront_api.infrastructure.resolution import Container, build_container

logger = LoggerFactoryService.build_logger(__name__)


def load_catalog(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if isinstance(data, list):
        return {"products": data}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping or a list of products")
    return data


def _run(command, container: Container | None = None) -> int:
    container = container or build_container(get_settings())
    container.persistence.connect()
    try:
        command(container)
    except ApplicationError as e:
        logger.error(f"{e.message}: {'; '.join(e.errors)}")
        return 1
    finally:
        container.persistence.close()
    return 0


def seed_catalog(argv: list[str] | None = None, container: Container | None = None) -> int:
    parser = argparse.ArgumentParser(prog="seed-catalog", description="Seed the product catalog")
    parser.add_argument("file", type=Path, help="YAML file with 'admin' and 'products' keys")
    args = parser.parse_args(argv)

    try:
        payload = load_catalog(args.file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Cannot read catalog file: {e}")
        return 1

    def command(c: Container) -> None:
        report = c.seed_catalog().execute(payload)
        print(f"Created {report.created} products")
        for problem in report.skipped:
            print(f"Skipped {problem}")

    return _run(command, container)


def make_admin(argv: list[str] | None = None, container: Container | None = None) -> int:
    parser = argparse.ArgumentParser(prog="make-admin", description="Grant the admin role")
    parser.add_argument("email", help="Email of an already registered user")
    args = parser.parse_args(argv)

    def command(c: Container) -> None:
        user = c.promote_user().execute(args.email)
        print(f"{user.username} <{user.email}> is now an admin")

    return _run(command, container)


def seed_catalog_main() -> None:
    sys.exit(seed_catalog())


def make_admin_main() -> None:
    sys.exit(make_admin())
