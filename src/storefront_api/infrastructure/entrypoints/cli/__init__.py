from storefront_api.infrastructure.entrypoints.cli.maintenance_cli import make_admin, seed_catalog

__all__ = ["make_admin", "seed_catalog"]
