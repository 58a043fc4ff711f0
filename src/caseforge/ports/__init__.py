from caseforge.ports.mediator import IMediator
from caseforge.ports.middleware import IMiddleware
from caseforge.ports.notificator import INotificator
from caseforge.ports.validation import IValidator

__all__ = ["IMediator", "IMiddleware", "INotificator", "IValidator"]
