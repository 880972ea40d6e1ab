"""Catalog queries used by the introspection tools.

All statements take named bind parameters (``:schema``, ``:name``,
``:limit``, ``:offset``) and never interpolate caller input.
"""

from __future__ import annotations

LIST_SCHEMAS = """
    SELECT schema_name
    FROM information_schema.schemata
    WHERE schema_name NOT IN ('pg_catalog', 'information_schema', 'pg_toast')
    ORDER BY schema_name
"""

# -------- tables --------

COUNT_TABLES = """
    SELECT COUNT(*) AS total
    FROM information_schema.tables
    WHERE table_schema = :schema AND table_type = 'BASE TABLE'
"""

LIST_TABLES = """
    SELECT
        t.table_name,
        pg_catalog.obj_description(pgc.oid, 'pg_class') AS table_description,
        (SELECT COUNT(*) FROM information_schema.columns c
         WHERE c.table_schema = t.table_schema AND c.table_name = t.table_name) AS column_count
    FROM information_schema.tables t
    LEFT JOIN pg_catalog.pg_namespace pgn ON pgn.nspname = t.table_schema
    LEFT JOIN pg_catalog.pg_class pgc
        ON pgc.relname = t.table_name AND pgc.relnamespace = pgn.oid
    WHERE t.table_schema = :schema AND t.table_type = 'BASE TABLE'
    ORDER BY t.table_name
    LIMIT :limit OFFSET :offset
"""

TABLE_COLUMNS = """
    SELECT
        c.column_name,
        c.data_type,
        c.character_maximum_length,
        c.is_nullable,
        c.column_default,
        pg_catalog.col_description(pgc.oid, c.ordinal_position) AS column_description
    FROM information_schema.columns c
    LEFT JOIN pg_catalog.pg_namespace pgn ON pgn.nspname = c.table_schema
    LEFT JOIN pg_catalog.pg_class pgc
        ON pgc.relname = c.table_name AND pgc.relnamespace = pgn.oid
    WHERE c.table_schema = :schema AND c.table_name = :table
    ORDER BY c.ordinal_position
"""

TABLE_CONSTRAINTS = """
    SELECT
        tc.constraint_name,
        tc.constraint_type,
        kcu.column_name,
        ccu.table_schema AS foreign_table_schema,
        ccu.table_name AS foreign_table_name,
        ccu.column_name AS foreign_column_name
    FROM information_schema.table_constraints AS tc
    LEFT JOIN information_schema.key_column_usage AS kcu
        ON tc.constraint_name = kcu.constraint_name
        AND tc.table_schema = kcu.table_schema
    LEFT JOIN information_schema.constraint_column_usage AS ccu
        ON ccu.constraint_name = tc.constraint_name
        AND ccu.table_schema = tc.table_schema
    WHERE tc.table_schema = :schema AND tc.table_name = :table
    ORDER BY tc.constraint_type, tc.constraint_name
"""

TABLE_INDEXES = """
    SELECT
        i.relname AS index_name,
        a.attname AS column_name,
        ix.indisunique AS is_unique,
        ix.indisprimary AS is_primary
    FROM pg_class t
    JOIN pg_index ix ON t.oid = ix.indrelid
    JOIN pg_class i ON i.oid = ix.indexrelid
    JOIN pg_attribute a ON a.attrelid = t.oid AND a.attnum = ANY(ix.indkey)
    JOIN pg_namespace n ON n.oid = t.relnamespace
    WHERE n.nspname = :schema AND t.relname = :table
    ORDER BY i.relname, a.attnum
"""

# -------- functions --------

COUNT_FUNCTIONS = """
    SELECT COUNT(*) AS total
    FROM pg_catalog.pg_proc p
    JOIN pg_catalog.pg_namespace n ON n.oid = p.pronamespace
    WHERE n.nspname = :schema
"""

LIST_FUNCTIONS = """
    SELECT
        p.proname AS function_name,
        pg_catalog.pg_get_function_arguments(p.oid) AS arguments,
        pg_catalog.pg_get_function_result(p.oid) AS return_type,
        CASE
            WHEN p.prokind = 'f' THEN 'function'
            WHEN p.prokind = 'p' THEN 'procedure'
            WHEN p.prokind = 'a' THEN 'aggregate'
            WHEN p.prokind = 'w' THEN 'window'
        END AS function_type,
        l.lanname AS language,
        pg_catalog.obj_description(p.oid, 'pg_proc') AS description
    FROM pg_catalog.pg_proc p
    JOIN pg_catalog.pg_namespace n ON n.oid = p.pronamespace
    JOIN pg_catalog.pg_language l ON l.oid = p.prolang
    WHERE n.nspname = :schema
    ORDER BY p.proname
    LIMIT :limit OFFSET :offset
"""

# pg_get_functiondef fails on aggregates, so only functions and procedures
FUNCTION_DEFINITION = """
    SELECT
        p.proname AS function_name,
        pg_catalog.pg_get_function_arguments(p.oid) AS arguments,
        CASE WHEN p.prokind IN ('f', 'p') THEN pg_catalog.pg_get_functiondef(p.oid) END AS definition,
        pg_catalog.obj_description(p.oid, 'pg_proc') AS description
    FROM pg_catalog.pg_proc p
    JOIN pg_catalog.pg_namespace n ON n.oid = p.pronamespace
    WHERE n.nspname = :schema AND p.proname = :name
    ORDER BY p.oid
"""

# -------- triggers --------

COUNT_TRIGGERS = """
    SELECT COUNT(*) AS total
    FROM information_schema.triggers
    WHERE trigger_schema = :schema
"""

LIST_TRIGGERS = """
    SELECT
        t.trigger_name,
        t.event_manipulation AS event,
        t.event_object_table AS table_name,
        t.action_timing AS timing,
        t.action_statement AS action,
        pg_catalog.obj_description(
            (SELECT tg.oid
             FROM pg_catalog.pg_trigger tg
             JOIN pg_catalog.pg_class c ON c.oid = tg.tgrelid
             JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
             WHERE tg.tgname = t.trigger_name AND n.nspname = t.trigger_schema
             LIMIT 1),
            'pg_trigger'
        ) AS description
    FROM information_schema.triggers t
    WHERE t.trigger_schema = :schema
    ORDER BY t.event_object_table, t.trigger_name
    LIMIT :limit OFFSET :offset
"""

TRIGGER_DEFINITION = """
    SELECT
        t.trigger_name,
        t.event_manipulation AS event,
        t.event_object_table AS table_name,
        t.action_timing AS timing,
        t.action_statement AS action,
        pg_catalog.pg_get_triggerdef(
            (SELECT tg.oid
             FROM pg_catalog.pg_trigger tg
             JOIN pg_catalog.pg_class c ON c.oid = tg.tgrelid
             JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
             WHERE tg.tgname = t.trigger_name AND n.nspname = t.trigger_schema
             LIMIT 1)
        ) AS trigger_definition
    FROM information_schema.triggers t
    WHERE t.trigger_schema = :schema AND t.trigger_name = :name
"""

# -------- health --------

SERVER_INFO = """
    SELECT
        current_database() AS db,
        current_user AS usr,
        now() AS server_time,
        version() AS version
"""
