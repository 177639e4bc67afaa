# -*- coding: utf-8 -*-
from tortoise import BaseDBAsyncClient


async def upgrade(db: BaseDBAsyncClient) -> str:
    return """
        CREATE TABLE IF NOT EXISTS "aerich" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "version" VARCHAR(255) NOT NULL,
    "app" VARCHAR(100) NOT NULL,
    "content" JSONB NOT NULL
);
CREATE TABLE IF NOT EXISTS "vehicle" (
    "id" UUID NOT NULL  PRIMARY KEY,
    "registration_number" VARCHAR(20) NOT NULL UNIQUE,
    "make" VARCHAR(50),
    "model" VARCHAR(50),
    "created_at" TIMESTAMPTZ NOT NULL  DEFAULT CURRENT_TIMESTAMP,
    "updated_at" TIMESTAMPTZ NOT NULL  DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS "destination" (
    "id" UUID NOT NULL  PRIMARY KEY,
    "name" VARCHAR(150) NOT NULL,
    "created_at" TIMESTAMPTZ NOT NULL  DEFAULT CURRENT_TIMESTAMP,
    "updated_at" TIMESTAMPTZ NOT NULL  DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS "trip" (
    "id" UUID NOT NULL  PRIMARY KEY,
    "trip_serial_number" VARCHAR(50) NOT NULL,
    "trip_start_date" TIMESTAMPTZ NOT NULL,
    "trip_end_date" TIMESTAMPTZ NOT NULL,
    "start_km" DOUBLE PRECISION NOT NULL,
    "end_km" DOUBLE PRECISION NOT NULL,
    "is_return_trip" BOOL NOT NULL  DEFAULT False,
    "destinations" JSONB NOT NULL,
    "fuel_quantity" DOUBLE PRECISION,
    "calculated_kmpl" DOUBLE PRECISION,
    "created_at" TIMESTAMPTZ NOT NULL  DEFAULT CURRENT_TIMESTAMP,
    "updated_at" TIMESTAMPTZ NOT NULL  DEFAULT CURRENT_TIMESTAMP,
    "vehicle_id" UUID NOT NULL REFERENCES "vehicle" ("id") ON DELETE CASCADE
);
CREATE INDEX IF NOT EXISTS "idx_trip_vehicle_start" ON "trip" ("vehicle_id", "trip_start_date");
CREATE TABLE IF NOT EXISTS "audittrail" (
    "id" UUID NOT NULL  PRIMARY KEY,
    "operation_type" VARCHAR(100) NOT NULL,
    "operation_category" VARCHAR(50) NOT NULL,
    "entity_type" VARCHAR(50) NOT NULL,
    "entity_id" VARCHAR(100) NOT NULL,
    "entity_description" TEXT,
    "action_performed" VARCHAR(9) NOT NULL,
    "validation_results" JSONB,
    "severity_level" VARCHAR(8) NOT NULL  DEFAULT 'info',
    "tags" JSONB NOT NULL,
    "business_context" TEXT,
    "timestamp" TIMESTAMPTZ NOT NULL  DEFAULT CURRENT_TIMESTAMP
);"""


async def downgrade(db: BaseDBAsyncClient) -> str:
    return """
        DROP TABLE IF EXISTS "audittrail";
DROP TABLE IF EXISTS "trip";
DROP TABLE IF EXISTS "destination";
DROP TABLE IF EXISTS "vehicle";"""
