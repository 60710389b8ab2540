from storefront.main import my_app

if __name__ == "__main__":
    settings = my_app.config["SETTINGS"]
    my_app.run(host=settings.host, port=settings.port, debug=settings.debug)
