"""
Error and warning classes for propforecast.

The projection engine itself never raises on well-formed numeric input; these
classes are used by the transforms, the loader and the CLI that sit around it.
"""


class ConfigError(Exception):
    """
    Configuration error while building or transforming a scenario.

    **Common Causes:**
    - A what-if transform references a loan or property id that is not in the scenario

    **Example Usage:**
        ```python
        from propforecast.core.errors import ConfigError
        from propforecast.engine.stress import refinance_loan

        try:
            refinance_loan(scenario, "no-such-loan", date(2027, 1, 1), 0.055)
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
    """

    pass


class PropForecastWarning(UserWarning):
    """Warning for data that is accepted but probably not what the caller meant."""
