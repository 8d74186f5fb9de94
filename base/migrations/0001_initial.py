import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import base.managers
import base.models.order_model


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="UserModel",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("username", models.CharField(max_length=255, unique=True)),
                ("email", models.EmailField(max_length=255, unique=True)),
                ("name", models.CharField(blank=True, max_length=255)),
                ("role", models.CharField(choices=[("customer", "Customer"), ("admin", "Admin")], default="customer", max_length=10)),
                ("refreshToken", models.CharField(blank=True, max_length=255, null=True, unique=True)),
                ("is_active", models.BooleanField(default=True)),
                ("is_staff", models.BooleanField(default=False)),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "db_table": "user",
            },
            managers=[
                ("objects", base.managers.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="CategoryModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
                ("updatedAt", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "category",
            },
        ),
        migrations.CreateModel(
            name="GuestSessionModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("sessionToken", models.CharField(max_length=255, unique=True)),
                ("expiresAt", models.DateTimeField()),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "guestSession",
            },
        ),
        migrations.CreateModel(
            name="BannerModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("imageUrl", models.CharField(max_length=1000)),
                ("linkUrl", models.CharField(blank=True, max_length=1000, null=True)),
                ("position", models.PositiveIntegerField(default=0)),
                ("isActive", models.BooleanField(default=True)),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
                ("updatedAt", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "banner",
            },
        ),
        migrations.CreateModel(
            name="DeliveryCostModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("zone", models.CharField(choices=[("INSIDE_DHAKA", "Inside Dhaka"), ("OUTSIDE_DHAKA", "Outside Dhaka")], max_length=20, unique=True)),
                ("cost", models.DecimalField(decimal_places=2, max_digits=12)),
                ("updatedAt", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "deliveryCost",
                "ordering": ["zone"],
                "constraints": [models.CheckConstraint(condition=models.Q(("cost__gte", 0)), name="delivery_cost_min_0")],
            },
        ),
        migrations.CreateModel(
            name="ProductModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=255, unique=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("basePrice", models.DecimalField(decimal_places=2, max_digits=12)),
                ("salePrice", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("costPrice", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("stock", models.IntegerField(default=0)),
                ("sku", models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ("featuredType", models.CharField(blank=True, choices=[("LATEST", "Latest"), ("HOT", "Hot"), ("POPULAR", "Popular")], max_length=10, null=True)),
                ("hasVariants", models.BooleanField(default=False)),
                ("metaTitle", models.CharField(blank=True, max_length=255, null=True)),
                ("metaDescription", models.TextField(blank=True, null=True)),
                ("metaKeywords", models.TextField(blank=True, null=True)),
                ("weight", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("dimensions", models.CharField(blank=True, max_length=100, null=True)),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
                ("updatedAt", models.DateTimeField(auto_now=True)),
                ("category", models.ForeignKey(db_column="categoryId", on_delete=django.db.models.deletion.PROTECT, related_name="products", to="base.categorymodel")),
            ],
            options={
                "db_table": "product",
                "constraints": [models.CheckConstraint(condition=models.Q(("basePrice__gte", 0)), name="product_base_price_min_0")],
            },
        ),
        migrations.CreateModel(
            name="ProductImageModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("url", models.CharField(max_length=1000)),
                ("alt", models.CharField(blank=True, max_length=255, null=True)),
                ("position", models.PositiveIntegerField(default=0)),
                ("isPrimary", models.BooleanField(default=False)),
                ("product", models.ForeignKey(db_column="productId", on_delete=django.db.models.deletion.CASCADE, related_name="images", to="base.productmodel")),
            ],
            options={
                "db_table": "productImage",
                "ordering": ["position"],
            },
        ),
        migrations.CreateModel(
            name="VariantOptionModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("values", models.JSONField(default=list)),
                ("product", models.ForeignKey(db_column="productId", on_delete=django.db.models.deletion.CASCADE, related_name="variantOptions", to="base.productmodel")),
            ],
            options={
                "db_table": "variantOption",
            },
        ),
        migrations.CreateModel(
            name="ProductVariantModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("sku", models.CharField(max_length=100, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("options", models.JSONField(blank=True, default=dict)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("salePrice", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("costPrice", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("stock", models.IntegerField(default=0)),
                ("imageUrl", models.CharField(blank=True, max_length=1000, null=True)),
                ("isActive", models.BooleanField(default=True)),
                ("product", models.ForeignKey(db_column="productId", on_delete=django.db.models.deletion.CASCADE, related_name="variants", to="base.productmodel")),
            ],
            options={
                "db_table": "productVariant",
            },
        ),
        migrations.CreateModel(
            name="CartModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
                ("updatedAt", models.DateTimeField(auto_now=True)),
                ("guestSession", models.OneToOneField(blank=True, db_column="guestSessionId", null=True, on_delete=django.db.models.deletion.CASCADE, related_name="cart", to="base.guestsessionmodel")),
                ("user", models.OneToOneField(blank=True, db_column="userId", null=True, on_delete=django.db.models.deletion.CASCADE, related_name="cart", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "cart",
                "constraints": [models.CheckConstraint(condition=models.Q(("user__isnull", True), ("guestSession__isnull", True), _connector="OR"), name="cart_single_owner")],
            },
        ),
        migrations.CreateModel(
            name="CartItemModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("quantity", models.PositiveSmallIntegerField(default=1)),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
                ("updatedAt", models.DateTimeField(auto_now=True)),
                ("cart", models.ForeignKey(db_column="cartId", on_delete=django.db.models.deletion.CASCADE, related_name="items", to="base.cartmodel")),
                ("product", models.ForeignKey(db_column="productId", on_delete=django.db.models.deletion.CASCADE, to="base.productmodel")),
                ("variant", models.ForeignKey(blank=True, db_column="variantId", null=True, on_delete=django.db.models.deletion.CASCADE, to="base.productvariantmodel")),
            ],
            options={
                "db_table": "cartItem",
                "constraints": [
                    models.UniqueConstraint(fields=("cart", "product", "variant"), name="cart_item_unique_variant"),
                    models.UniqueConstraint(condition=models.Q(("variant__isnull", True)), fields=("cart", "product"), name="cart_item_unique_product"),
                    models.CheckConstraint(condition=models.Q(("quantity__gte", 1), ("quantity__lte", 99)), name="cart_item_quantity_range"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderModel",
            fields=[
                ("id", models.CharField(default=base.models.order_model.generate_order_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("createdAt", models.DateTimeField(auto_now_add=True)),
                ("updatedAt", models.DateTimeField(auto_now=True)),
                ("customerName", models.CharField(max_length=255)),
                ("customerMobile", models.CharField(max_length=20)),
                ("customerAddress", models.TextField()),
                ("deliveryZone", models.CharField(choices=[("INSIDE_DHAKA", "Inside Dhaka"), ("OUTSIDE_DHAKA", "Outside Dhaka")], max_length=20)),
                ("subtotal", models.DecimalField(decimal_places=2, max_digits=12)),
                ("deliveryCost", models.DecimalField(decimal_places=2, max_digits=12)),
                ("totalAmount", models.DecimalField(decimal_places=2, max_digits=12)),
                ("status", models.CharField(choices=[("PENDING", "Pending"), ("PROCESSING", "Processing"), ("SHIPPED", "Shipped"), ("DELIVERED", "Delivered"), ("CANCELLED", "Cancelled")], db_index=True, default="PENDING", max_length=20)),
                ("paymentStatus", models.CharField(choices=[("PENDING", "Pending"), ("PAID", "Paid"), ("FAILED", "Failed"), ("REFUNDED", "Refunded")], default="PENDING", max_length=20)),
                ("user", models.ForeignKey(blank=True, db_column="userId", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="orders", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "order",
            },
        ),
        migrations.CreateModel(
            name="OrderItemModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("productId", models.UUIDField()),
                ("variantId", models.UUIDField(blank=True, null=True)),
                ("productName", models.CharField(max_length=255)),
                ("variantName", models.CharField(blank=True, max_length=255, null=True)),
                ("sku", models.CharField(blank=True, max_length=100, null=True)),
                ("productImage", models.CharField(blank=True, max_length=1000, null=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("quantity", models.PositiveSmallIntegerField()),
                ("order", models.ForeignKey(db_column="orderId", on_delete=django.db.models.deletion.CASCADE, related_name="items", to="base.ordermodel")),
            ],
            options={
                "db_table": "orderItem",
            },
        ),
    ]
