"""
Garment Revenue Forecast

Revenue forecasting engine for garment manufacturers. Company-reported
operational metrics are blended with macroeconomic and market context
through a fixed-weight ensemble, industry-specific adjustments and a
rule-based insight generator.
"""

__version__ = "1.0.0"
