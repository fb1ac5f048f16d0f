from enum import Enum


class ErrorCode(Enum):
    UNRECOGNIZED_CHARACTER = 'Unrecognized character'
    EMPTY_INPUT = 'Empty input'
    END_OF_INPUT = 'Unexpected end of input'
    UNEXPECTED_LEADING_TOKEN = 'Unexpected leading token'
    MISSING_OPERATOR = 'Missing operator'
    UNKNOWN_OPERATOR_BINDING_POWER = 'Unknown operator binding power'
    DIVISION_BY_ZERO = 'Division by zero'
    INTERNAL_INVARIANT_VIOLATION = 'Internal invariant violation'


class CalcError(Exception):
    error_code = None

    def __init__(self, message=None, token=None, error_code=None):
        if error_code is not None:
            self.error_code = error_code
        self.token = token
        self.message = message or self.error_code.value
        super().__init__(self.message)

    def __str__(self) -> str:
        return f'{self.__class__.__name__}: {self.message}'


class ParserError(CalcError):
    pass


class EvaluationError(CalcError):
    pass


class EmptyInputError(ParserError):
    error_code = ErrorCode.EMPTY_INPUT


class EndOfInputError(ParserError):
    error_code = ErrorCode.END_OF_INPUT


class UnexpectedLeadingTokenError(ParserError):
    error_code = ErrorCode.UNEXPECTED_LEADING_TOKEN


class MissingOperatorError(ParserError):
    error_code = ErrorCode.MISSING_OPERATOR


class UnknownOperatorBindingPowerError(ParserError):
    error_code = ErrorCode.UNKNOWN_OPERATOR_BINDING_POWER


class DivisionByZeroError(EvaluationError):
    error_code = ErrorCode.DIVISION_BY_ZERO


class InternalInvariantViolationError(EvaluationError):
    error_code = ErrorCode.INTERNAL_INVARIANT_VIOLATION
