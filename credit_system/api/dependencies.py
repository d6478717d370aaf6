# This file provides dependency factories for FastAPI routes and middleware.
# It exists so the database client, stores, and services are created once and shared through injection.
# The setup keeps routers thin and makes endpoint tests easy to override.

from __future__ import annotations

from functools import lru_cache

from credit_system.api.api_config import ApiConfig, get_api_config
from credit_system.api.services.credit_service import CreditService
from credit_system.api.services.customer_service import CustomerService
from credit_system.common.db import DatabaseClient
from credit_system.repositories.credit_repository import CreditRepository
from credit_system.repositories.customer_repository import CustomerRepository


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_customer_service() -> CustomerService:
    config = get_api_config()
    repository = CustomerRepository(
        db=get_database_client(),
        table_name=config.customer_table_name,
        credit_table_name=config.credit_table_name,
    )
    return CustomerService(repository=repository)


@lru_cache(maxsize=1)
def get_credit_service() -> CreditService:
    config = get_api_config()
    repository = CreditRepository(
        db=get_database_client(),
        table_name=config.credit_table_name,
        customer_table_name=config.customer_table_name,
    )
    return CreditService(repository=repository, customer_service=get_customer_service())


def get_config() -> ApiConfig:
    return get_api_config()
