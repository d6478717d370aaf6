"""
Domain records and rules for customers and their credit applications.
"""

from credit_system.domain.entities import Address, Credit, Customer, CustomerPatch
from credit_system.domain.exceptions import BusinessException
from credit_system.domain.status import Status

__all__ = ["Address", "BusinessException", "Credit", "Customer", "CustomerPatch", "Status"]
