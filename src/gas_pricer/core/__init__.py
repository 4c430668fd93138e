"""Pricing core: the GasPricer control loop, its errors and target suppliers."""
