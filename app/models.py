# -*- coding: utf-8 -*-
from tortoise import fields
from tortoise.exceptions import ValidationError
from tortoise.models import Model
from tortoise.signals import pre_save

from app.enums import AuditActionEnum, AuditSeverityEnum


class Vehicle(Model):
    id = fields.UUIDField(pk=True)
    registration_number = fields.CharField(max_length=20, unique=True)
    make = fields.CharField(max_length=50, null=True)
    model = fields.CharField(max_length=50, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)


class Destination(Model):
    id = fields.UUIDField(pk=True)
    name = fields.CharField(max_length=150)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)


class Trip(Model):
    id = fields.UUIDField(pk=True)
    vehicle = fields.ForeignKeyField("app.Vehicle", related_name="trips")
    trip_serial_number = fields.CharField(max_length=50)
    trip_start_date = fields.DatetimeField()
    trip_end_date = fields.DatetimeField()
    start_km = fields.FloatField()
    end_km = fields.FloatField()
    is_return_trip = fields.BooleanField(default=False)
    # Ordered list of Destination ids (as strings)
    destinations = fields.JSONField(default=list)
    fuel_quantity = fields.FloatField(null=True)
    calculated_kmpl = fields.FloatField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        indexes = (("vehicle_id", "trip_start_date"),)


@pre_save(Trip)
async def validate_trip(sender, instance: Trip, using_db, update_fields):
    """
    This validator checks the following constraints:
    - The end odometer reading can't be lower than the start reading
    - The trip can't end before it starts
    """
    if instance.end_km < instance.start_km:
        raise ValidationError("end_km must be greater than or equal to start_km")
    if instance.trip_end_date < instance.trip_start_date:
        raise ValidationError("trip_end_date must not be earlier than trip_start_date")


class AuditTrail(Model):
    id = fields.UUIDField(pk=True)
    operation_type = fields.CharField(max_length=100)
    operation_category = fields.CharField(max_length=50)
    entity_type = fields.CharField(max_length=50)
    entity_id = fields.CharField(max_length=100)
    entity_description = fields.TextField(null=True)
    action_performed = fields.CharEnumField(enum_type=AuditActionEnum)
    validation_results = fields.JSONField(null=True)
    severity_level = fields.CharEnumField(
        enum_type=AuditSeverityEnum, default=AuditSeverityEnum.INFO
    )
    tags = fields.JSONField(default=list)
    business_context = fields.TextField(null=True)
    timestamp = fields.DatetimeField(auto_now_add=True)
