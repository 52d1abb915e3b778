"""
Orders services package - service layer for order management.

- PricingCalculator: exact Decimal pricing of (food, quantity) lines
- ComboExpander: resolves a combo into its price and constituent lines
- OrderService: atomic creation of order, details and transaction
- OrderLifecycleService: status transitions, transaction sync, soft delete
- OrderQueryService: order listings and order lines
"""

# Pricing
from .pricing_service import PricingCalculator, PricedLine

# Combos
from .combo_service import ComboExpander, ComboExpansion

# Core order operations
from .order_service import OrderService

# Lifecycle operations
from .lifecycle_service import OrderLifecycleService

# Read side
from .query_service import OrderQueryService

__all__ = [
    # Pricing
    'PricingCalculator',
    'PricedLine',
    # Combos
    'ComboExpander',
    'ComboExpansion',
    # Core
    'OrderService',
    # Lifecycle
    'OrderLifecycleService',
    # Queries
    'OrderQueryService',
]
