"""Invoice decoding exceptions."""


class InvoiceError(Exception):
    """Base exception for rgb-lightning-invoice."""


class InvalidEncodingError(InvoiceError):
    """Invoice text is not valid bech32."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid bech32 encoding: {reason}")


class InvalidHrpError(InvoiceError):
    """Human-readable part does not look like ln<currency>[amount][multiplier]."""

    def __init__(self, hrp: str):
        self.hrp = hrp
        super().__init__(f"Invalid HRP format: {hrp!r}")


class InvoiceTooShortError(InvoiceError):
    """Data part cannot hold a timestamp, its tagged fields and a signature."""

    def __init__(self, word_count: int, reason: str | None = None):
        self.word_count = word_count
        detail = reason or f"{word_count} words, need at least 111"
        super().__init__(f"Invoice data too short: {detail}")


class TruncatedFieldError(InvoiceError):
    """A tagged field header or payload runs past the end of the data."""

    def __init__(self, tag: int | None, needed: int, remaining: int):
        self.tag = tag
        self.needed = needed
        self.remaining = remaining
        what = "header" if tag is None else f"tag {tag} payload"
        super().__init__(
            f"Tagged field {what} needs {needed} words, only {remaining} remain"
        )


class DecodeFailure(InvoiceError):
    """Top-level decode failure. The original error is chained as __cause__."""

    def __init__(self, reason: str, invoice: str | None = None):
        self.reason = reason
        self.invoice = invoice
        super().__init__(f"Failed to decode Lightning invoice: {reason}")
