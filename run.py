import os

from blogapp import create_app
from blogapp.config import DevConfig, ProdConfig

debug = os.getenv("DEBUG", "true").strip().lower() in {"1", "true", "yes", "on"}
app = create_app(DevConfig if debug else ProdConfig)

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5000"))
    app.run(host=host, port=port, debug=debug)
