from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from connections.models import User, FriendRequest, Friendship


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for users with the learner profile fields."""
    list_display = ('email', 'full_name', 'native_language', 'is_onboarded', 'is_staff')
    list_filter = ('is_onboarded', 'is_staff', 'is_active')
    search_fields = ('email', 'full_name', 'username')
    ordering = ('full_name', 'id')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': ('full_name', 'bio', 'profile_pic', 'native_language', 'learning_languages', 'location', 'is_onboarded')}),
    )


@admin.register(FriendRequest)
class FriendRequestAdmin(admin.ModelAdmin):
    """Read-mostly view of friend requests; status changes go through the API."""
    list_display = ('id', 'sender', 'recipient', 'status', 'created_at', 'updated_at')
    list_filter = ('status', 'created_at')
    search_fields = ('sender__email', 'recipient__email')
    readonly_fields = ('sender', 'recipient', 'status', 'pair_key', 'created_at', 'updated_at')

    def has_add_permission(self, request):
        return False


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    list_display = ('id', 'user_low', 'user_high', 'created_at')
    search_fields = ('user_low__email', 'user_high__email')
    readonly_fields = ('user_low', 'user_high', 'created_at')

    def has_add_permission(self, request):
        """Edges only come from accepted requests."""
        return False
