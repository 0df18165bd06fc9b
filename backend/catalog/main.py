from catalog.app_factory import create_app
from catalog.core.config import settings

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("catalog.main:app", host=settings.HOST, port=settings.PORT)
