"""Fixed-width unsigned integers: limbs, comparison, powers, products and
quotients, byte and digit conversions, and integer conversions."""

__version__ = "0.1.0"