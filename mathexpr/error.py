

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class InvalidExpressionError(MathError):
    pass

class DivisionByZeroError(MathError):
    pass

class NaNResultError(MathError):
    pass

class InfiniteNumberError(MathError):
    pass

class InvalidConfigurationError(MathError, ValueError):
    pass



Error_Dictionary= {

    "3" : "Expression Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator: ", # + operator
    "3009" : "Missing ')'. ",
    "3010" : "Missing '('. ",
    "3011" : "Unexpected Token: ", # + Token
    "3012" : "Invalid equation: ", # + Equation
    "3026" : "Number too big.",
    "3027" : "Missing Number after: ", # + operator
    "3031" : "Unknown Variable: ", # + variable name
    "3032" : "Result is not a number: ", # + base ^ exponent
    "3033" : "Expression must be text: ", # + given type
    "3034" : "Invalid value for variable: ", # + name=value


    "5001" : "Max scale must be between 1 and 32: ", # + given value
    "5002" : "Invalid rounding mode: ", # + given mode


    "9999" : "Unexpected Error: " #+error
}


def message_for(code, detail=""):
    """Return the message text registered for code, followed by detail."""
    return ERROR_MESSAGES.get(code, ERROR_MESSAGES["9999"]) + str(detail)
