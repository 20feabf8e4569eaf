"""core/keys.py -- configuration keys shared by reader and writer job trees."""

AUTO_CREATE_TABLE = "autoCreateTable"
CONN_MARK = "connection"
JDBC_URL = "jdbcUrl"
TABLE = "table"
QUERY_SQL = "querySql"
USERNAME = "username"
PASSWORD = "password"
