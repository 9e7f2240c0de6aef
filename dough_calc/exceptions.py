class DoughCalcError(Exception):
    """Base class for errors raised while formulating a dough."""


class UnknownStyleError(DoughCalcError, KeyError):
    """The requested dough style is not in the catalog."""

    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self):
        return f"Unknown dough style: {self.key!r}"


class NegativeRemainderError(DoughCalcError, ValueError):
    """
    The pre-ferment takes more flour or water than the whole dough holds.

    Raised for a pre-ferment flour percentage that is too high for the
    chosen overall hydration. The user can fix it by lowering the
    pre-ferment share or raising the hydration.
    """

    def __init__(self, pre_ferment_pct, hydration, final_flour, final_water):
        self.pre_ferment_pct = pre_ferment_pct
        self.hydration = hydration
        self.final_flour = final_flour
        self.final_water = final_water
        super().__init__(
            f"Pre-ferment at {pre_ferment_pct}% flour with {hydration}% dough hydration "
            f"leaves {final_flour}g flour and {final_water}g water for the final dough. "
            "Lower the pre-ferment percentage or raise the hydration."
        )
