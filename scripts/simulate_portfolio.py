#!/usr/bin/env python3
"""Simulate a loan portfolio and print its final state.

Thin launcher for ``bank_loan.cli``; installed as ``bank-loan-simulate``.
"""

from bank_loan.cli import main

if __name__ == "__main__":
    main()
