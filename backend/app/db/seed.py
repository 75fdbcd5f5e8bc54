import asyncio
import random
from datetime import date, timedelta
from sqlalchemy import select
from app.config import Config
from app.db.database import db
from app.models import Product, Sale, User, Role, Status
from app.services.product_service import slugify
from app.services.user_service import hash_password


# Sample products: (name, category, price, review, description)
PRODUCTS_DATA = [
    ("Black Oud", "Oriental", 129.00, 9, "Smoky agarwood with saffron and leather."),
    ("White Musk", "Musk", 79.00, 8, "Clean musk over soft powdery florals."),
    ("Amber Night", "Oriental", 99.00, 7, "Warm amber, vanilla and tonka bean."),
    ("Citrus Bloom", "Fresh", 59.00, 6, "Bergamot, neroli and pink grapefruit."),
    ("Rose Velvet", "Floral", 89.00, 8, "Damask rose wrapped in patchouli."),
    ("Sea Salt Cedar", "Woody", 69.00, 7, "Mineral accord over Atlas cedar."),
    ("Vetiver Smoke", "Woody", 109.00, 9, "Haitian vetiver with birch tar."),
    ("Jasmine Noir", "Floral", 94.00, 7, "Night jasmine and dark plum."),
    ("Green Fig", "Fresh", 64.00, 6, "Fig leaf, coconut water and cedar."),
    ("Leather Saffron", "Oriental", 139.00, 10, "Suede, saffron and raspberry."),
    ("Iris Powder", "Floral", 119.00, 8, "Orris butter with violet leaf."),
    ("Sandal Milk", "Woody", 84.00, 7, "Creamy sandalwood and fig milk."),
]


async def seed_database():
    await db.connect()
    await db.create_tables()
    try:
        async with await db.session() as session:
            await _seed(session)
    finally:
        await db.disconnect()


async def _seed(session):
    # Check if data exists
    result = await session.execute(select(Product).limit(1))
    if result.scalar():
        print("Database already seeded")
        return

    # Create products
    products = []
    for name, category, price, review, description in PRODUCTS_DATA:
        product = Product(
            name=name,
            slug=slugify(name),
            category=category,
            price=price,
            review=review,
            description=description,
            image_path=Config.DEFAULT_PRODUCT_IMAGE,
        )
        products.append(product)
        session.add(product)

    products[0].is_featured = True

    # Admin account
    session.add(User(
        name="Administrator",
        email=Config.ADMIN_EMAIL,
        password=hash_password(Config.ADMIN_PASSWORD),
        status_id=Status.ACTIVE.value,
        role_id=Role.ADMIN.value,
    ))

    await session.flush()  # Get IDs

    # Generate sales data for the last two years
    end_date = date.today()
    current = end_date - timedelta(days=730)

    while current <= end_date:
        num_sales = random.randint(1, 6)
        for _ in range(num_sales):
            product = random.choice(products)
            quantity = random.randint(1, 3)

            # Add seasonality (higher in Q4)
            factor = 1.3 if current.month >= 10 else 1.0
            total = round(product.price * quantity * factor * random.uniform(0.9, 1.1), 2)

            session.add(Sale(
                product_id=product.id,
                quantity=quantity,
                total_amount=total,
                sale_date=current
            ))

        current += timedelta(days=1)

    await session.commit()
    print("Database seeded successfully!")


if __name__ == "__main__":
    asyncio.run(seed_database())
