"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Value Objects: AccountIdentifier, Payee / Payer, ReferenceKind
- Entities: the PaymentInstruction aggregate
- Domain Services: the payload encoder and the opt-in validation pass
- Domain Exceptions: identifier and instruction errors

The domain layer has no dependencies on rendering libraries or configuration.
"""
