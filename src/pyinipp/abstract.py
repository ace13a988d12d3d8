# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Something that loads a `T` from a file and saves it back.

    The filename is optional since some handlers
    (like `IniParser`) are just as useful on in-memory streams.
    """
    def __init__(self, filename: str | None = None) -> None:
        self._fn = filename

    @property
    def filename(self) -> str:
        if self._fn is None:
            raise ValueError(
                f'{type(self).__name__} was created without a filename.')
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn or '<stream>'
