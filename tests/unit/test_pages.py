from apps.site import Site
from apps.site.pages import (
    CONSULTA_BODY,
    NAME_FORM,
    NO_NAME_YET,
    PAGES,
    consulta,
    index,
    numero_aleatorio,
    repito_tu_nombre,
)
from lib.contracts.template import PageTemplate


def test_routing_table_has_four_static_paths():
    assert list(PAGES) == ["/", "/consulta", "/numero_aleatorio", "/repito_tu_nombre"]


def test_index_fragment():
    assert index({}) == "<div>Esto es la página principal (/)</div>"


def test_consulta_fragment_keeps_whitespace():
    assert consulta({}) == CONSULTA_BODY
    assert CONSULTA_BODY.startswith("\n    <div>\n      Esto es un string multilinea\n")


def test_numero_aleatorio_fragment(monkeypatch):
    monkeypatch.setattr("apps.site.pages.random.random", lambda: 0.5)
    assert numero_aleatorio({}) == "<div> El número aleatorio entre 0 y 1 es: 0.5</div>"


def test_repito_tu_nombre_branches_on_presence():
    assert repito_tu_nombre({}) == NAME_FORM + NO_NAME_YET
    assert repito_tu_nombre({"nombre": ""}) == NAME_FORM + "<div>Tu nombre es: </div>"
    assert repito_tu_nombre({"nombre": "Ana"}) == NAME_FORM + "<div>Tu nombre es: Ana</div>"


def test_repito_tu_nombre_escaping():
    assert "&amp;" in repito_tu_nombre({"nombre": "a&b"})
    assert "a&b" in repito_tu_nombre({"nombre": "a&b"}, escape_echo=False)


def test_site_respond_renders_into_template():
    site = Site(PageTemplate(text="<main>{{{cuerpo}}}</main>"))
    response = site.respond("<p>x</p>")
    assert response.status_code == 200
    assert response.body == "<main><p>x</p></main>".encode("utf-8")
    assert response.media_type == "text/html"


def test_site_page_dispatches_by_path():
    site = Site(PageTemplate(text="[{{{cuerpo}}}]"))
    assert site.page("/", {}).body.decode("utf-8") == f"[{index({})}]"
