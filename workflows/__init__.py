# =============================================================================
# workflows/__init__.py
# =============================================================================
# Fixed, typed pipelines.  weather_workflow.py runs
#
#   {city} ──fetch-weather──▶ Forecast ──plan-activities──▶ {activities}
#
# with every step's input and output validated before the next step runs.
# =============================================================================
