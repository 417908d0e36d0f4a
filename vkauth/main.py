import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI

from vkauth.auth import router as auth_router


load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

app = FastAPI(title="vkauth", version="0.1.0")

app.include_router(auth_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
