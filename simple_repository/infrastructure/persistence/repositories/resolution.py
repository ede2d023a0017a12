"""Model resolution for SqlRepository subclasses.

A repository finds its model in one of three ways, in order:

  1. an explicit ``model`` class attribute,
  2. an explicit dotted ``model_name`` class attribute,
  3. the naming convention ``<root package>[.<model_package>].<Name>``, where
     Name is the repository class name without its trailing "Repository".

So ``blog.repositories.UserRepository`` with ``model_package = "models"``
resolves to ``blog.models.User``.
"""

from __future__ import annotations

import importlib
import logging

from sqlalchemy import inspect

from simple_repository.domain.exceptions import ModelNotFoundError

logger = logging.getLogger(__name__)

REPOSITORY_SUFFIX = "Repository"


def conventional_model_name(repository_cls: type, model_package: str = "") -> str:
    """Derive the dotted path of the model a repository class serves."""
    root = repository_cls.__module__.split(".")[0]
    name = repository_cls.__name__
    if name.endswith(REPOSITORY_SUFFIX) and name != REPOSITORY_SUFFIX:
        name = name[: -len(REPOSITORY_SUFFIX)]

    parts = [root]
    if model_package:
        parts.append(model_package.strip("."))
    parts.append(name)
    return ".".join(parts)


def is_mapped_class(obj: object) -> bool:
    return isinstance(obj, type) and inspect(obj, raiseerr=False) is not None


def import_model(model_name: str) -> type:
    """Import a mapped class from its dotted path.  Raises ModelNotFoundError."""
    module_path, _, class_name = model_name.rpartition(".")
    if not module_path:
        raise ModelNotFoundError(model_name)

    try:
        module = importlib.import_module(module_path)
        model = getattr(module, class_name)
    except (ImportError, AttributeError) as exc:
        raise ModelNotFoundError(model_name) from exc

    if not is_mapped_class(model):
        raise ModelNotFoundError(model_name)
    return model


def resolve_model(repository_cls: type) -> type:
    """Return the mapped class served by repository_cls."""
    explicit = getattr(repository_cls, "model", None)
    if explicit is not None:
        if not is_mapped_class(explicit):
            raise ModelNotFoundError(getattr(explicit, "__qualname__", repr(explicit)))
        return explicit

    model_name = getattr(repository_cls, "model_name", "") or conventional_model_name(
        repository_cls, getattr(repository_cls, "model_package", "")
    )
    model = import_model(model_name)
    logger.debug("Resolved %s to model %s", repository_cls.__qualname__, model_name)
    return model
