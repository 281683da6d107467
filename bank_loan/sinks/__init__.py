"""Output sinks for exporting loan data."""

from bank_loan.sinks.console import ConsoleSink
from bank_loan.sinks.serialization import loan_to_dict, serialize_value, to_dict

__all__ = ["ConsoleSink", "loan_to_dict", "serialize_value", "to_dict"]
