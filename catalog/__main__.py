"""
Run the catalog on Flask's development server: python -m catalog
"""
import os
from . import create_app

# APP_ENV picks the config class (see get_config())
app = create_app()

if __name__ == "__main__":
    app.run(port=int(os.getenv("PORT", "3000")), debug=app.config["DEBUG"])
