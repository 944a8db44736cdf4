import sqlalchemy

metadata = sqlalchemy.MetaData()

# sqlite only autoincrements INTEGER primary keys.
BigId = sqlalchemy.BigInteger().with_variant(sqlalchemy.Integer(), "sqlite")
