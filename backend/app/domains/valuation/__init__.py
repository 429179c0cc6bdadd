"""
Valuation Domain

This domain turns quarterly revenue, share counts and treasury rates into one
comparable "revenue / interest rate" value per ticker, plus the group average,
tolerance bounds, ordering and dividend summaries built on it.
"""
