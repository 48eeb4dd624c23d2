class BaseSequenceError(Exception):
    pass


class CallbackError(BaseSequenceError):
    def __init__(self, message: str, index: int) -> None:
        super().__init__(message)
        self.index = index


class ProducerError(CallbackError):
    pass


class PredicateError(CallbackError):
    pass


class IndexSourceError(BaseSequenceError, IndexError):
    pass
