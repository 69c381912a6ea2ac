"""
Run the development server: python -m docextract
"""
from docextract import create_app


def main():
    app = create_app()
    host, port = app.config['HOST'], app.config['PORT']
    app.logger.info("Server running at http://localhost:%s", port)
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
