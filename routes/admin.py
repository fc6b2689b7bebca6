from flask import Blueprint, request, current_app, redirect, url_for
from sqlalchemy.exc import SQLAlchemyError

from models import db
from models.contact import Contact
from models.lounge_booking import LoungeBooking
from models.room import STATUS_BOOKED
from services import (
    list_bookings,
    get_booking,
    update_booking,
    delete_booking,
    toggle_booking_status,
    list_rooms,
    toggle_room_status,
)
from utils.auth_context import login_required
from utils.audit import log_event
from utils.pages import action, field, render_table, render_edit, render_message

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")


def _not_found(what: str):
    return render_message(f"{what} not found"), 404


def _storage_error(message: str):
    db.session.rollback()
    current_app.logger.exception(message)
    return message, 500


def _toggle_action(status, url):
    if status == STATUS_BOOKED:
        return action("Mark Available", url, css="btn-secondary")
    return action("Mark Booked", url, css="btn-success")


def _fmt(dt):
    return dt.strftime("%Y-%m-%d %H:%M:%S") if dt else ""


# ---------- Bookings ----------
@admin_bp.get("/bookings")
@login_required
def bookings():
    try:
        rows = list_bookings()
    except SQLAlchemyError:
        return _storage_error("Error loading bookings")

    table = [
        {
            "cells": [b.id, b.name, b.email, b.phone, b.room, b.guests, b.check_in, b.check_out,
                      b.status or "available", _fmt(b.created_at)],
            "actions": [
                _toggle_action(b.status, url_for("admin.toggle_booking", booking_id=b.id)),
                action("Delete", url_for("admin.delete_booking_row", booking_id=b.id),
                       css="btn-danger", confirm="Delete this booking?"),
                action("Edit", url_for("admin.edit_booking", booking_id=b.id),
                       css="btn-warning", method="GET"),
            ],
        }
        for b in rows
    ]
    headers = ["ID", "Name", "Email", "Phone", "Room", "Guests", "Check-in", "Check-out",
               "Status", "Created", "Actions"]
    return render_table("Bookings", "All Bookings", headers, table), 200


@admin_bp.post("/bookings/toggle/<int:booking_id>")
@login_required
def toggle_booking(booking_id: int):
    try:
        new_status = toggle_booking_status(booking_id)
        if new_status is None:
            return _not_found("Booking")
        log_event("BOOKING_STATUS_TOGGLE", entity="booking", entity_id=booking_id, metadata={"status": new_status})
    except SQLAlchemyError:
        return _storage_error("Error toggling booking status")

    current_app.logger.info("Booking %s marked as %s", booking_id, new_status)
    return redirect(url_for("admin.bookings"))


@admin_bp.post("/bookings/delete/<int:booking_id>")
@login_required
def delete_booking_row(booking_id: int):
    try:
        deleted = delete_booking(booking_id)
        if deleted:
            log_event("BOOKING_DELETE", entity="booking", entity_id=booking_id)
    except SQLAlchemyError:
        return _storage_error("Error deleting booking")
    return redirect(url_for("admin.bookings"))


@admin_bp.get("/bookings/edit/<int:booking_id>")
@login_required
def edit_booking(booking_id: int):
    try:
        b = get_booking(booking_id)
    except SQLAlchemyError:
        return _storage_error("Server error")
    if b is None:
        return _not_found("Booking")

    fields = [
        field("name", "Name", b.name),
        field("email", "Email", b.email, type="email"),
        field("phone", "Phone", b.phone),
        field("room", "Room", b.room),
        field("guests", "Guests", b.guests, type="number"),
        field("check_in", "Check-in", b.check_in, type="date"),
        field("check_out", "Check-out", b.check_out, type="date"),
    ]
    return render_edit(
        "Edit Booking", b.id, url_for("admin.save_booking", booking_id=b.id), fields, url_for("admin.bookings")
    ), 200


@admin_bp.post("/bookings/edit/<int:booking_id>")
@login_required
def save_booking(booking_id: int):
    try:
        booking = update_booking(booking_id, request.form.to_dict())
        if booking is None:
            return _not_found("Booking")
        log_event("BOOKING_UPDATE", entity="booking", entity_id=booking_id)
    except SQLAlchemyError:
        return _storage_error("Error updating booking")
    return redirect(url_for("admin.bookings"))


# ---------- Rooms ----------
@admin_bp.get("/rooms")
@login_required
def rooms():
    try:
        rows = list_rooms()
    except SQLAlchemyError:
        return _storage_error("Error loading rooms")

    table = [
        {
            "cells": [r.id, r.name, r.status],
            "actions": [_toggle_action(r.status, url_for("admin.toggle_room", room_id=r.id))],
        }
        for r in rows
    ]
    return render_table("Rooms", "Manage Rooms", ["ID", "Room Name", "Status", "Actions"], table), 200


@admin_bp.post("/rooms/toggle/<int:room_id>")
@login_required
def toggle_room(room_id: int):
    try:
        new_status = toggle_room_status(room_id)
        if new_status is None:
            return _not_found("Room")
        log_event("ROOM_STATUS_TOGGLE", entity="room", entity_id=room_id, metadata={"status": new_status})
    except SQLAlchemyError:
        return _storage_error("Error toggling room status")

    current_app.logger.info("Room %s marked as %s", room_id, new_status)
    return redirect(url_for("admin.rooms"))


# ---------- Contacts ----------
@admin_bp.get("/contacts")
@login_required
def contacts():
    try:
        rows = Contact.query.order_by(Contact.created_at.desc(), Contact.id.desc()).all()
    except SQLAlchemyError:
        return _storage_error("Error loading contacts")

    table = [
        {
            "cells": [c.id, c.name, c.email, c.message, _fmt(c.created_at)],
            "actions": [
                action("Delete", url_for("admin.delete_contact", contact_id=c.id),
                       css="btn-danger", confirm="Delete this contact?"),
                action("Edit", url_for("admin.edit_contact", contact_id=c.id),
                       css="btn-warning", method="GET"),
            ],
        }
        for c in rows
    ]
    headers = ["ID", "Name", "Email", "Message", "Created", "Actions"]
    return render_table("Contacts", "All Contacts", headers, table), 200


@admin_bp.post("/contacts/delete/<int:contact_id>")
@login_required
def delete_contact(contact_id: int):
    try:
        deleted = Contact.query.filter_by(id=contact_id).delete()
        db.session.commit()
        if deleted:
            log_event("CONTACT_DELETE", entity="contact", entity_id=contact_id)
    except SQLAlchemyError:
        return _storage_error("Error deleting contact")
    return redirect(url_for("admin.contacts"))


@admin_bp.get("/contacts/edit/<int:contact_id>")
@login_required
def edit_contact(contact_id: int):
    try:
        c = db.session.get(Contact, contact_id)
    except SQLAlchemyError:
        return _storage_error("Server error")
    if c is None:
        return _not_found("Contact")

    fields = [
        field("name", "Name", c.name),
        field("email", "Email", c.email, type="email"),
        field("message", "Message", c.message, type="textarea"),
    ]
    return render_edit(
        "Edit Contact", c.id, url_for("admin.save_contact", contact_id=c.id), fields, url_for("admin.contacts")
    ), 200


@admin_bp.post("/contacts/edit/<int:contact_id>")
@login_required
def save_contact(contact_id: int):
    try:
        c = db.session.get(Contact, contact_id)
        if c is None:
            return _not_found("Contact")
        c.name = (request.form.get("name") or "").strip()
        c.email = (request.form.get("email") or "").strip()
        c.message = (request.form.get("message") or "").strip()
        db.session.commit()
        log_event("CONTACT_UPDATE", entity="contact", entity_id=contact_id)
    except SQLAlchemyError:
        return _storage_error("Error updating contact")
    return redirect(url_for("admin.contacts"))


# ---------- Lounge bookings ----------
@admin_bp.get("/lounge")
@login_required
def lounge():
    try:
        rows = LoungeBooking.query.order_by(LoungeBooking.created_at.desc(), LoungeBooking.id.desc()).all()
    except SQLAlchemyError:
        return _storage_error("Error loading lounge bookings")

    table = [
        {
            "cells": [lb.id, lb.name, lb.email, lb.phone, lb.table_type, lb.guests, lb.date, lb.time,
                      lb.message or "", lb.status, _fmt(lb.created_at)],
            "actions": [
                action("Delete", url_for("admin.delete_lounge", lounge_id=lb.id),
                       css="btn-danger", confirm="Delete this lounge booking?"),
                action("Edit", url_for("admin.edit_lounge", lounge_id=lb.id),
                       css="btn-warning", method="GET"),
            ],
        }
        for lb in rows
    ]
    headers = ["ID", "Name", "Email", "Phone", "Table", "Guests", "Date", "Time", "Message",
               "Status", "Created", "Actions"]
    return render_table("Lounge", "Lounge Bookings", headers, table), 200


@admin_bp.post("/lounge/delete/<int:lounge_id>")
@login_required
def delete_lounge(lounge_id: int):
    try:
        deleted = LoungeBooking.query.filter_by(id=lounge_id).delete()
        db.session.commit()
        if deleted:
            log_event("LOUNGE_DELETE", entity="lounge_booking", entity_id=lounge_id)
    except SQLAlchemyError:
        return _storage_error("Error deleting lounge booking")
    return redirect(url_for("admin.lounge"))


@admin_bp.get("/lounge/edit/<int:lounge_id>")
@login_required
def edit_lounge(lounge_id: int):
    try:
        lb = db.session.get(LoungeBooking, lounge_id)
    except SQLAlchemyError:
        return _storage_error("Server error")
    if lb is None:
        return _not_found("Lounge booking")

    fields = [
        field("name", "Name", lb.name),
        field("email", "Email", lb.email, type="email"),
        field("phone", "Phone", lb.phone),
        field("table_type", "Table", lb.table_type),
        field("guests", "Guests", lb.guests, type="number"),
        field("date", "Date", lb.date, type="date"),
        field("time", "Time", lb.time, type="time"),
        field("message", "Message", lb.message, type="textarea", required=False),
    ]
    return render_edit(
        "Edit Lounge Booking", lb.id, url_for("admin.save_lounge", lounge_id=lb.id), fields, url_for("admin.lounge")
    ), 200


@admin_bp.post("/lounge/edit/<int:lounge_id>")
@login_required
def save_lounge(lounge_id: int):
    form = request.form
    try:
        guests = int(form.get("guests"))
    except (TypeError, ValueError):
        return render_message("Guests must be a number"), 400

    try:
        lb = db.session.get(LoungeBooking, lounge_id)
        if lb is None:
            return _not_found("Lounge booking")
        lb.name = (form.get("name") or "").strip()
        lb.email = (form.get("email") or "").strip()
        lb.phone = (form.get("phone") or "").strip()
        lb.table_type = (form.get("table_type") or "").strip()
        lb.guests = guests
        lb.date = (form.get("date") or "").strip()
        lb.time = (form.get("time") or "").strip()
        lb.message = (form.get("message") or "").strip() or None
        db.session.commit()
        log_event("LOUNGE_UPDATE", entity="lounge_booking", entity_id=lounge_id)
    except SQLAlchemyError:
        return _storage_error("Error updating lounge booking")
    return redirect(url_for("admin.lounge"))
