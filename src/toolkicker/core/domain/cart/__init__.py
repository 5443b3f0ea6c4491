from toolkicker.core.domain.cart.cart_line import CartLine

__all__ = ["CartLine"]
