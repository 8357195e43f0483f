from fastapi import Depends, FastAPI
import uvicorn
import os

from jsendjar import __version__
from jsendjar.envelope import ResponseEnvelope
from jsendjar.transport import get_envelope, install_exception_handlers, send
from jsendjar.utils.logger_util import get_logger

logger = get_logger(__name__)
app = FastAPI(title="jsendjar", version=__version__)
install_exception_handlers(app)


@app.get("/health")
async def health(env: ResponseEnvelope = Depends(get_envelope)):
    env.add_data("service", "jsendjar").add_data("version", __version__)
    return send(env)


if __name__ == "__main__":
    host = os.environ.get("JSENDJAR_HOST", "127.0.0.1")
    port = int(os.environ.get("JSENDJAR_PORT", "8000"))
    logger.info("starting jsendjar on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)
