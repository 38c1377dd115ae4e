"""Usage examples shown by ``mysql.<group>.help()`` inside the sandbox."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

GROUP_EXAMPLES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "core": (
            'await mysql.core.readQuery("SELECT * FROM users LIMIT 10")',
            'await mysql.core.describeTable("users")',
            'await mysql.core.createTable("orders", {"columns": [{"name": "id", "type": "INT AUTO_INCREMENT PRIMARY KEY"}]})',
            "await mysql.core.listTables()",
        ),
        "transactions": (
            'tx = (await mysql.transactions.begin())["transactionId"]',
            'await mysql.transactions.savepoint(tx, "sp1")',
            'await mysql.transactions.rollbackTo(tx, "sp1")',
            "await mysql.transactions.commit(tx)",
            'await mysql.transactions.execute([{"sql": "INSERT ..."}, {"sql": "UPDATE ..."}])',
        ),
        "json": (
            'await mysql.json.extract("docs", "data", "$.user.name")',
            'await mysql.json.set("docs", "data", "$.status", "active", "id=1")',
            'await mysql.json.contains("docs", "data", \'{"type": "admin"}\')',
            'await mysql.json.merge(\'{"a": 1}\', \'{"b": 2}\')',
            'await mysql.json.search("docs", "data", "active")',
        ),
        "text": (
            'await mysql.text.regexpMatch("users", "email", "^admin@")',
            'await mysql.text.likeSearch("products", "name", "%widget%")',
            'await mysql.text.soundex("users", "name", "Smith")',
        ),
        "fulltext": (
            'await mysql.fulltext.fulltextSearch("articles", ["title", "content"], "database")',
            'await mysql.fulltext.fulltextCreate("articles", ["title", "content"])',
            'await mysql.fulltext.fulltextBoolean("articles", ["content"], "+MySQL -Oracle")',
        ),
        "performance": (
            'await mysql.performance.explain({"sql": "SELECT * FROM orders WHERE status = ?", "params": ["active"]})',
            'await mysql.performance.slowQueries({"limit": 10})',
            "await mysql.performance.bufferPoolStats()",
            "await mysql.performance.innodbStatus()",
            'await mysql.performance.tableStats({"table": "orders"})',
        ),
        "optimization": (
            'await mysql.optimization.indexRecommendation({"table": "orders"})',
            'await mysql.optimization.queryRewrite({"query": "SELECT * FROM orders WHERE status = ?"})',
            'await mysql.optimization.forceIndex({"table": "orders", "query": "SELECT * FROM orders", "indexName": "idx_status"})',
        ),
        "admin": (
            'await mysql.admin.optimizeTable("orders")',
            'await mysql.admin.checkTable("orders")',
            'await mysql.admin.analyzeTable("orders")',
            "await mysql.admin.flushTables()",
            'await mysql.admin.killQuery({"processId": 12345})',
        ),
        "monitoring": (
            'await mysql.monitoring.showStatus({"pattern": "Threads%"})',
            'await mysql.monitoring.showVariables({"pattern": "max_connections"})',
            "await mysql.monitoring.showProcesslist()",
            "await mysql.monitoring.queryStats()",
        ),
        "backup": (
            'await mysql.backup.createDump({"tables": ["users", "orders"]})',
            'await mysql.backup.exportTable("users", {"format": "csv"})',
            'await mysql.backup.importData("users", {"data": [{"name": "Alice", "email": "alice@test.com"}]})',
            'await mysql.backup.restoreDump("backup.sql")',
        ),
        "replication": (
            "await mysql.replication.slaveStatus()",
            "await mysql.replication.lag()",
            "await mysql.replication.masterStatus()",
            'await mysql.replication.binlogEvents({"limit": 20})',
        ),
        "partitioning": (
            'await mysql.partitioning.partitionInfo("events")',
            'await mysql.partitioning.addPartition("events", "p2024q1", "RANGE", "2024040100")',
            'await mysql.partitioning.dropPartition("events", "p2023q1")',
        ),
        "schema": (
            "await mysql.schema.listViews()",
            'await mysql.schema.createView("active_users", "SELECT * FROM users WHERE active = 1")',
            "await mysql.schema.listFunctions()",
            'await mysql.schema.listTriggers("orders")',
        ),
        "events": (
            'await mysql.events.eventCreate({"name": "cleanup", "schedule": {"type": "RECURRING", "interval": 1, "intervalUnit": "DAY"}, "body": "DELETE FROM logs"})',
            "await mysql.events.eventList()",
            "await mysql.events.schedulerStatus()",
        ),
        "sysschema": (
            'await mysql.sysschema.sysSchemaStats({"schema": "testdb"})',
            'await mysql.sysschema.sysStatementSummary({"limit": 10})',
            "await mysql.sysschema.sysInnodbLockWaits()",
            "await mysql.sysschema.sysMemorySummary()",
        ),
        "stats": (
            'await mysql.stats.descriptive("orders", "amount")',
            'await mysql.stats.percentiles("orders", "amount", [50, 95, 99])',
            'await mysql.stats.timeSeries("metrics", "ts", "value", {"interval": "hour"})',
            'await mysql.stats.histogram("orders", "amount", 10)',
        ),
        "spatial": (
            'await mysql.spatial.distance("locations", "geom", {"point": {"longitude": -74, "latitude": 40.7}})',
            'await mysql.spatial.distanceSphere("locations", "geom", {"point": {"longitude": -74, "latitude": 40.7}})',
            "await mysql.spatial.point(-74, 40.7)",
            'await mysql.spatial.buffer({"geometry": "POINT(-74 40.7)", "distance": 1000})',
        ),
        "security": (
            "await mysql.security.sslStatus()",
            'await mysql.security.userPrivileges({"user": "app_user"})',
            "await mysql.security.audit()",
            "await mysql.security.sensitiveTables()",
            'await mysql.security.passwordValidate("test123")',
        ),
        "cluster": (
            'await mysql.cluster.clusterStatus({"summary": True})',
            'await mysql.cluster.clusterRouterStatus({"summary": True})',
            "await mysql.cluster.clusterSwitchover()",
            "await mysql.cluster.grMembers()",
            "await mysql.cluster.clusterTopology()",
        ),
        "roles": (
            'await mysql.roles.roleCreate({"name": "app_reader"})',
            'await mysql.roles.roleGrant({"role": "app_reader", "privileges": ["SELECT"], "database": "mydb"})',
            'await mysql.roles.roleAssign({"role": "app_reader", "user": "app_user"})',
            "await mysql.roles.roleList()",
        ),
        "docstore": (
            'await mysql.docstore.docCreateCollection({"name": "products", "schema": "mydb"})',
            'await mysql.docstore.docAdd({"collection": "products", "documents": [{"name": "Widget", "price": 9.99}]})',
            'await mysql.docstore.docFind({"collection": "products", "filter": "$.name"})',
        ),
        "router": (
            "await mysql.router.status()",
            "await mysql.router.routes()",
            'await mysql.router.routeHealth({"routeName": "myroute"})',
        ),
        "proxysql": (
            "# ProxySQL tools need a separate ProxySQL admin connection",
            "# see each tool description for its connection requirements",
        ),
        "shell": (
            "await mysql.shell.version()",
            'await mysql.shell.runScript("print(\'hello\')", "py")',
            'await mysql.shell.exportTable({"schema": "mydb", "table": "users", "outputPath": "/tmp/users.csv", "format": "csv"})',
            'await mysql.shell.dumpSchemas(["mydb"], "/backup/mydb", {"dryRun": True})',
        ),
    },
)


def get_group_examples(group: str) -> list[str]:
    """Return the examples for *group*, or an empty list for unknown groups."""
    return list(GROUP_EXAMPLES.get(group, ()))
