"""FastAPI adapter exposing the ELOT 743 transliterator over HTTP."""

import json
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse, Response

from elot743 import __version__
from elot743._transliterator import EncodingError, Transliterator

logger = logging.getLogger(__name__)


def create_app(transliterator: Optional[Transliterator] = None) -> FastAPI:
    """Build the HTTP application around a transliterator instance."""
    engine = transliterator or Transliterator()

    app = FastAPI(
        title="ELOT 743 API",
        description="Greek-to-Latin transliteration following ELOT 743",
        version=__version__,
    )

    @app.get("/")
    def convert(
        greektext: Optional[str] = Query(None, description="Greek text to transliterate"),
        json_flag: Optional[str] = Query(
            None, alias="json", description="Return a JSON object instead of plain text"
        ),
    ):
        """Transliterate the greektext parameter."""
        if greektext is None:
            raise HTTPException(status_code=406, detail="Missing greektext parameter")

        try:
            elot743_text = engine.transliterate(greektext)
        except EncodingError as e:
            raise HTTPException(status_code=400, detail=str(e))

        logger.debug("Transliterated %d characters", len(greektext))

        if json_flag is None:
            return PlainTextResponse(elot743_text)

        body = json.dumps(
            {"greektext": greektext, "elot743text": elot743_text},
            ensure_ascii=False,
        )
        return Response(content=body, media_type="application/json; charset=utf-8")

    return app


app = create_app()
