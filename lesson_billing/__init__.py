"""
Lesson billing.

Prices lessons with interchangeable cost strategies and builds monthly
invoices from the results.

Usage:
    >>> from lesson_billing.pricing import StrategySelector
    >>> from lesson_billing.billing.invoice_builder import InvoiceBuilder
    >>> from lesson_billing.utils.config import config
    >>>
    >>> builder = InvoiceBuilder(StrategySelector.from_config(config))
    >>> summary = builder.build("2025-10", lessons)
"""

__version__ = "0.1.0"
