"""PlexPay: small-business back office (expenses, income, payroll and reports) over a JSON API."""

__version__ = "1.0.0"
