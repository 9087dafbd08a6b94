"""Repositories: SQL for one table each, bound to a transaction connection."""

from salesctl.infrastructure.repositories.company import CompanyRepository
from salesctl.infrastructure.repositories.customer import CustomerRepository

__all__ = ["CompanyRepository", "CustomerRepository"]
