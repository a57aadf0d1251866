"""
Application startup validation and initialization.

This module performs startup checks before the application serves requests
and sets up logging for the process.
"""

import logging
from typing import List, Tuple

import sqlalchemy as sa
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.config import Settings

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ["tables", "menu_items", "staff", "orders", "order_items"]


class StartupValidator:
    """Validates application startup requirements"""

    def __init__(self, engine: Engine, settings: Settings):
        self.engine = engine
        self.settings = settings
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def check_database_connection(self) -> bool:
        """Check database connectivity"""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            logger.info("Database connection successful")
            return True
        except SQLAlchemyError as e:
            self.errors.append(f"Database connection failed: {str(e)}")
            return False

    def check_environment_config(self) -> bool:
        """Flag settings that are unsafe outside development"""
        if self.settings.is_production:
            if self.settings.debug:
                self.warnings.append("DEBUG is enabled in production")
            if self.settings.is_sqlite:
                self.warnings.append("SQLite database configured in production")
        return True

    def check_required_tables(self) -> bool:
        """Check if required database tables exist"""
        try:
            existing_tables = sa.inspect(self.engine).get_table_names()
        except SQLAlchemyError as e:
            self.warnings.append(f"Could not check database tables: {str(e)}")
            return True

        missing_tables = [t for t in REQUIRED_TABLES if t not in existing_tables]
        if missing_tables:
            self.warnings.append(
                f"Missing database tables: {', '.join(missing_tables)}. "
                "Run migrations with: alembic upgrade head"
            )
        return True

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        """Run all validation checks"""
        checks = [
            ("Environment Configuration", self.check_environment_config),
            ("Database Connection", self.check_database_connection),
            ("Database Tables", self.check_required_tables),
        ]

        all_passed = True

        for check_name, check_func in checks:
            logger.info(f"Running check: {check_name}")
            if not check_func():
                all_passed = False

        return all_passed, self.errors, self.warnings


def run_startup_checks(engine: Engine, settings: Settings) -> Tuple[bool, List[str]]:
    """Run all startup validation checks and log the outcome"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_title}")
    logger.info(f"Environment: {settings.environment}")
    logger.info("=" * 60)

    validator = StartupValidator(engine, settings)
    passed, errors, warnings = validator.validate_all()

    if warnings:
        logger.warning("Startup Warnings:")
        for warning in warnings:
            logger.warning(f"  {warning}")

    if errors:
        logger.error("Startup Errors:")
        for error in errors:
            logger.error(f"  {error}")

    if not passed and settings.is_production:
        raise RuntimeError("Cannot start in production with startup errors")
    elif not passed:
        logger.warning(f"Starting in {settings.environment} mode despite errors")
    else:
        logger.info("All startup checks passed")

    return passed, warnings


def configure_startup_logging(settings: Settings):
    """Configure logging for the process"""
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
