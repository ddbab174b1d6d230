"""Domain exceptions for qrbill-core.

Exception hierarchy:
    DomainException (base)
    ├── Account Identifier Errors
    │   └── InvalidAccountIdentifierError
    └── Malformed Instruction Errors
        └── MalformedInstructionError
            ├── InvalidAmountError
            ├── InvalidCurrencyError
            ├── InvalidReferenceError
            └── InvalidTextFieldError

The payload encoder raises nothing: it trusts that the instruction it is
given was built through the domain constructors. Adapter failures
(QR raster, PDF layout) live in the application ports as RenderingError.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from rendering errors.
    """


# =============================================================================
# Account Identifier Errors
# =============================================================================


class InvalidAccountIdentifierError(DomainException, ValueError):
    """Raised when an account identifier fails the IBAN checks.

    Two ways to fail:
        - length outside [15, 34] after whitespace removal
        - ISO 7064 MOD 97-10 remainder different from 1

    This is the only error AccountIdentifier construction can raise.
    """


# =============================================================================
# Malformed Instruction Errors
# =============================================================================


class MalformedInstructionError(DomainException, ValueError):
    """Base for errors found by the opt-in instruction validation pass.

    PaymentInstruction.create() never raises these; only
    validate_instruction() does.
    """


class InvalidAmountError(MalformedInstructionError):
    """Raised when the amount is not positive, not finite or too large."""


class InvalidCurrencyError(MalformedInstructionError):
    """Raised when the currency is not one accepted on a QR-bill (CHF, EUR)."""


class InvalidReferenceError(MalformedInstructionError):
    """Raised when the reference text does not match its declared kind.

    - QRR: 27 digits with a valid recursive mod-10 check digit
    - SCOR: ISO 11649 creditor reference (RF + check digits)
    - NON: no reference text at all
    """


class InvalidTextFieldError(MalformedInstructionError):
    """Raised when a free-text field contains a line break.

    Every payload field occupies exactly one line; a CR or LF inside a
    party field, the reference or the additional information would shift
    all later lines of the payload.
    """
