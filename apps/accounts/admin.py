# apps/accounts/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, SocialAccount


class SocialAccountInline(admin.TabularInline):
    model = SocialAccount
    extra = 0
    readonly_fields = ['provider', 'social_key', 'created_at']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ['id', 'email', 'nickname', 'is_staff', 'created_at']
    list_filter = ['is_staff', 'is_active', 'personal_info_agreement']
    search_fields = ['email', 'nickname']
    ordering = ['-created_at']
    readonly_fields = ['created_at', 'updated_at', 'last_login']
    filter_horizontal = ['preferred_ingredients', 'disliked_ingredients', 'groups', 'user_permissions']
    inlines = [SocialAccountInline]

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Profile', {
            'fields': (
                'nickname',
                'profile_image',
                'personal_info_agreement',
                'preferred_ingredients',
                'disliked_ingredients',
            )
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {'fields': ('last_login', 'created_at', 'updated_at')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2'),
        }),
    )


@admin.register(SocialAccount)
class SocialAccountAdmin(admin.ModelAdmin):
    list_display = ['id', 'provider', 'social_key', 'user', 'created_at']
    list_filter = ['provider']
    search_fields = ['social_key', 'user__email']
    readonly_fields = ['created_at']
