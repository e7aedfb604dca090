"""MessFlow package.

Meal-attendance dashboard fed by a ThingSpeak channel. Organized by feature
modules (telemetry, records, analytics, ...) with a thin Flask controller
layer over plain service classes.
"""
