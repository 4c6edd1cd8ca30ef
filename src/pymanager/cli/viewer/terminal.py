"""
Utilidades de terminal para el visor interactivo.

Modo raw de entrada y captura de teclas.
"""

import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, TextIO


class KeyReader:
    """
    Lee teclas de un stream (bloqueante).

    Una tecla escape solo inicia una secuencia si le sigue '['; cualquier
    otro caracter leído después del escape se conserva para la próxima
    lectura.
    """

    def __init__(self, stream: TextIO = None):
        if stream is None:
            stream = sys.stdin
        self.stream = stream
        self._pending = ""

    def _read_char(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self.stream.read(1)

    def __call__(self) -> str:
        """
        Returns:
            - 'esc': escape suelto o secuencia ESC [ X completa
            - 'enter': tecla enter
            - otro caracter tal cual

        Raises:
            EOFError: el stream se cerró
        """
        key = self._read_char()

        if not key:
            raise EOFError("stdin cerrado")
        elif key == '\x1b':
            key2 = self.stream.read(1)
            if key2 == '[':
                self.stream.read(1)
            else:
                self._pending = key2
            return 'esc'
        elif key == '\r' or key == '\n':
            return 'enter'

        return key


@contextmanager
def raw_terminal(stream: TextIO = None) -> Iterator[KeyReader]:
    """
    Pone el terminal en modo raw de entrada mientras dura el bloque.

    Se usa cbreak: sin eco ni buffer de línea, pero con el procesamiento
    de salida intacto para que Rich pueda dibujar con saltos de línea.
    Los atributos originales se restauran al salir, también ante
    excepciones. Si el stream no es un terminal, termios.error se propaga.

    Yields:
        KeyReader sobre el stream
    """
    if stream is None:
        stream = sys.stdin

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield KeyReader(stream)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
