"""
Centralized permission classes for the kiln marketplace.
Use these instead of creating duplicate permission classes in individual apps.
"""
from rest_framework import permissions


class IsManufacturer(permissions.BasePermission):
    """Permission for manufacturer-only endpoints"""
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.is_manufacturer


class IsProvider(permissions.BasePermission):
    """Permission for any kind of provider (coal, transport, labour)"""
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.is_provider


class IsCustomer(permissions.BasePermission):
    """Permission for end customers buying from manufacturers"""
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.is_customer


class IsAdmin(permissions.BasePermission):
    """Permission for admin-only endpoints"""
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.is_admin_user


class IsManufacturerOrProvider(permissions.BasePermission):
    """Permission for endpoints shared by both sides of an order"""
    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False
        return request.user.is_manufacturer or request.user.is_provider


class IsManufacturerOrCustomer(permissions.BasePermission):
    """Permission for endpoints shared by a manufacturer and their customers"""
    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False
        return request.user.is_manufacturer or request.user.is_customer


class IsManufacturerOwnerOrReadOnly(permissions.BasePermission):
    """
    Manufacturers may edit their own catalogue entries; everyone else only reads.
    """
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return request.user.is_authenticated and request.user.is_manufacturer

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True

        if hasattr(obj, 'manufacturer'):
            return obj.manufacturer == request.user

        return False
