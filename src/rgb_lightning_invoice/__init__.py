"""rgb-lightning-invoice — Offline BOLT11 decoder for RGB Lightning invoices.

Decodes Lightning invoices, including the RGB asset tags, into the same
record the RGB Lightning node's decode endpoint returns. No network,
node or signature verification involved.

Usage:
    from rgb_lightning_invoice import decode_invoice

    invoice = decode_invoice("lnbcrt30u1p5f9szd...")
    invoice.amt_msat      # 3000000
    invoice.network       # Network.REGTEST
    invoice.to_dict()     # node-compatible dict
"""

from rgb_lightning_invoice.bolt11 import (
    DEFAULT_EXPIRY_SECONDS,
    DecodedInvoice,
    assemble_invoice,
    decode_invoice,
    extract_amount_sats,
    is_valid_invoice,
)
from rgb_lightning_invoice.bech32_codec import MAX_INVOICE_LENGTH
from rgb_lightning_invoice.exceptions import (
    DecodeFailure,
    InvalidEncodingError,
    InvalidHrpError,
    InvoiceError,
    InvoiceTooShortError,
    TruncatedFieldError,
)
from rgb_lightning_invoice.hrp import HrpDescriptor, Network, parse_hrp
from rgb_lightning_invoice.tagged_fields import TaggedField, scan_tagged_fields

__version__ = "0.1.0"

__all__ = [
    # Decoding
    "decode_invoice",
    "is_valid_invoice",
    "extract_amount_sats",
    "assemble_invoice",
    "DecodedInvoice",
    # Building blocks
    "parse_hrp",
    "HrpDescriptor",
    "Network",
    "scan_tagged_fields",
    "TaggedField",
    # Defaults
    "MAX_INVOICE_LENGTH",
    "DEFAULT_EXPIRY_SECONDS",
    # Exceptions
    "InvoiceError",
    "InvalidEncodingError",
    "InvalidHrpError",
    "InvoiceTooShortError",
    "TruncatedFieldError",
    "DecodeFailure",
]
