# This file marks the routers package for API route modules.
# It exists so import paths stay clear when registering route groups.
# The package groups endpoint modules by resource: customers, credits, and health.
