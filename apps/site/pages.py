"""Body fragments for each page of the site.

Every builder receives the request's query mapping and returns the HTML that
replaces the template marker.  Builders never touch the template themselves;
that is the job of :class:`apps.site.Site`.
"""

from __future__ import annotations

import html
import random
from typing import Callable, Dict, Mapping


PageBuilder = Callable[[Mapping[str, str], bool], str]

INDEX_BODY = "<div>Esto es la página principal (/)</div>"

CONSULTA_BODY = """
    <div>
      Esto es un string multilinea
    </div>
    <div>
      Y se enviará cuando se acceda a <b>/consulta</b>
    </div>
  """

NAME_FORM = """
    <form method="GET" action="repito_tu_nombre">
      <div>Escribe tu nombre:</div>
      <input type="text" name="nombre"/>
      <input type="submit" value="Aceptar"/>
    </form>
  """

NO_NAME_YET = "Aún no has escrito tu nombre."


def index(query: Mapping[str, str], escape_echo: bool = True) -> str:
    return INDEX_BODY


def consulta(query: Mapping[str, str], escape_echo: bool = True) -> str:
    return CONSULTA_BODY


def numero_aleatorio(query: Mapping[str, str], escape_echo: bool = True) -> str:
    aleatorio = random.random()
    return f"<div> El número aleatorio entre 0 y 1 es: {aleatorio}</div>"


def repito_tu_nombre(query: Mapping[str, str], escape_echo: bool = True) -> str:
    # Presence decides the branch: ``?nombre=`` echoes an empty name.
    if "nombre" not in query:
        return NAME_FORM + NO_NAME_YET

    nombre = query["nombre"]
    if escape_echo:
        nombre = html.escape(nombre)
    return f"{NAME_FORM}<div>Tu nombre es: {nombre}</div>"


PAGES: Dict[str, PageBuilder] = {
    "/": index,
    "/consulta": consulta,
    "/numero_aleatorio": numero_aleatorio,
    "/repito_tu_nombre": repito_tu_nombre,
}


__all__ = ["PAGES", "PageBuilder", "NAME_FORM", "NO_NAME_YET"]
