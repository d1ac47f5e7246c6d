"""eds_importer - rewrite a marketing homepage into Hero / Tiles / Metadata blocks.

Quick usage::

    from eds_importer import import_page

    result = import_page(html, url="https://www.westpac.com.au/")
    print(result.path)
    print(result.html())

Host-framework entry points::

    from eds_importer import generate_document_path, transform_dom

    main = transform_dom(document=soup, url=url, html=html, params=params)
    path = generate_document_path(document=soup, url=url, html=html, params=params)
"""

from eds_importer.dom import DomOps, SoupDomOps
from eds_importer.importer import generate_document_path, import_page, transform_dom
from eds_importer.items import ImportParams, ImportResult
from eds_importer.paths import InvalidURLError, sanitize_path

__version__ = "0.1.0"
__all__ = [
    "DomOps",
    "ImportParams",
    "ImportResult",
    "InvalidURLError",
    "SoupDomOps",
    "generate_document_path",
    "import_page",
    "sanitize_path",
    "transform_dom",
]
