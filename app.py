"""
Folio Admin
===========

Run the dashboard against a portfolio API.

Run with:
    API_URL=http://localhost:5000/api python app.py

Visit:
    http://localhost:3000        - Dashboard
    http://localhost:3000/login  - Admin login
"""

from folio_admin import create_app
from folio_admin.core.config import Config

app = create_app()


if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Folio Admin")
    print("=" * 60)
    print(f"Dashboard:       http://localhost:{Config.port}")
    print(f"Admin Login:     http://localhost:{Config.port}/login")
    print(f"Portfolio API:   {app.config['API_URL']}")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=Config.port, debug=True)
