from __future__ import annotations


class ChartContractError(ValueError):
    """Raised when chart inputs break a drawing contract.

    Covers mismatched series lengths, non-finite values, value ranges that do
    not fit the canvas and mismatched panel widths. Never recovered inside the
    engine.
    """
