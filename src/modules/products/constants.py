"""Product domain constants.

Bounds shared by the model, the boundary DTOs and the migration.
"""

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 20

# Upper bound of a signed 64-bit column (PositiveBigIntegerField).
PRICE_MAX = 9_223_372_036_854_775_807

# Fields a patch may carry, in the order they are applied.
UPDATABLE_FIELDS: tuple[str, ...] = ("name", "price", "description")
