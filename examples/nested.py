import martini

TEXT = """; database settings
[db]
host = "localhost"
port = 5432

[db.pool]
size = 5
timeout = 2.5
size = 10
"""

config = martini.ParserConfig(
    enable_subsections=True,
    duplicate_policy=martini.DuplicatePolicy.OVERWRITE,
)

doc = martini.loads(TEXT, config)

db = doc.section("db")
print(f"connecting to {db['host']}:{db['port']}")

pool = doc.section("db.pool")
print(f"pool size {pool['size']}, timeout {pool['timeout']}s")

for comment in doc.comments:
    print(f"; {comment}")
