class EventProcessorError(Exception):
    pass

class ClientError(EventProcessorError):
    """Caller's fault: malformed envelope or undecodable payload. Answered with 400, never redelivered."""
    pass

class ProcessingError(EventProcessorError):
    """System's fault while dispatching/handling. Answered with 500 so Pub/Sub redelivers."""
    pass
