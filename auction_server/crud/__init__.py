from . import crud_participant  # noqa: F401
