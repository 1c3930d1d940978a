from dishka import Provider as DishkaProvider

from seodex.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all seodex DI providers. Dependencies default to the UOW scope."""

    scope = Scope.UOW
