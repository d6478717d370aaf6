# This file marks the services package for the customer and credit business rules.
# It exists so routers can depend on cohesive service classes instead of raw stores.
# Service modules raise BusinessException and never leak storage error types.
