def run() -> None:
    """
    Run before every entry point:
        test suite
        shells and scripts
    """
    from loguru import logger

    from ecommerce.common.logs import configure_logging

    configure_logging()
    configure_models()

    logger.info('application setup complete ✅')


def configure_models() -> None:
    """
    When using declarative we need to run this for our entry points
    to have context on our models / relationships example when
    traversing "customer.id" as a foreign key
    """
    from sqlalchemy.orm import configure_mappers

    from ecommerce.common.model import import_model_modules

    import_model_modules()
    configure_mappers()


def create_schema() -> None:
    """
    Creates any missing tables for the registered models
    """
    from ecommerce.common.model import BaseModel
    from ecommerce.network.database.session import get_engine

    configure_models()
    BaseModel.metadata.create_all(get_engine())
