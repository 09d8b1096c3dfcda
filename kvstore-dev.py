# Development server for kvstore using the in-memory dict backend
from kvstore_lib.main import create_app, Config
app = create_app(Config(storage_backend='memory', log_level='DEBUG'))
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=3000)
