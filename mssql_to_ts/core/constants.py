"""Constants shared by the schema source, the resolvers and the renderers."""

# TypeScript type names
BOOLEAN_TYPE = "boolean"
NUMBER_TYPE = "number"
DATE_TYPE = "Date"
STRING_TYPE = "string"
UNKNOWN_TYPE = "any"
NULL_TYPE = "null"

# Catalog query for tables and views, one row per column in ordinal order.
# OUTER APPLY keeps columns governed by other constraints and never yields
# more than one row per column.
SCHEMA_QUERY = """
SELECT
    t.name AS TableName,
    c.name AS ColumnName,
    tp.name AS DataType,
    c.max_length AS MaxLength,
    c.precision AS Precision,
    c.scale AS Scale,
    c.is_nullable AS IsNullable,
    cc.name AS CheckConstraintName,
    cc.definition AS CheckConstraintDefinition,
    CASE
        WHEN t.type = 'U' THEN 'Table'
        WHEN t.type = 'V' THEN 'View'
    END AS ObjectType
FROM
    (SELECT object_id, name, type FROM sys.tables WHERE is_ms_shipped = 0
    UNION ALL
    SELECT object_id, name, type FROM sys.views WHERE is_ms_shipped = 0) t
INNER JOIN
    sys.columns c ON t.object_id = c.object_id
INNER JOIN
    sys.types tp ON c.user_type_id = tp.user_type_id
OUTER APPLY
    (SELECT TOP (1) chk.name, chk.definition
    FROM sys.check_constraints chk
    WHERE chk.parent_object_id = t.object_id
        AND chk.parent_column_id = c.column_id
        AND chk.name LIKE 'chk[_]%'
    ORDER BY chk.name) cc
WHERE
    t.type IN ('U', 'V')
ORDER BY
    t.name, c.column_id;
"""
