"""Products: forward rate agreement."""

from fra.products.forward_rate_agreement import ForwardRateAgreement, Position

__all__ = ["ForwardRateAgreement", "Position"]
