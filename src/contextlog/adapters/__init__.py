"""Adapters connecting the logging core to outputs and frameworks."""
