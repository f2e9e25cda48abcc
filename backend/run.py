from expense_tracker import create_app

app = create_app()

if __name__ == "__main__":
    port = app.config["PORT"]
    app.logger.info("Server running on port %s", port)
    app.run(host='0.0.0.0', port=port)
