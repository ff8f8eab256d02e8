"""Build-time discovery of libmysqlclient and selection of matching bindings."""
