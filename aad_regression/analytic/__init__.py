from .formulas import black_scholes_digital_option_delta, black_scholes_digital_option_value

__all__ = ["black_scholes_digital_option_delta", "black_scholes_digital_option_value"]
