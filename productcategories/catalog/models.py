"""SQLAlchemy models for the product catalog.

Defines the category, product and product_category tables.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from productcategories.domain.entities import NAME_MAX_LENGTH, Category, Product
from productcategories.infrastructure.database import Base


class CategoryModel(Base):
    """Category row.

    Attributes:
        id: Auto-incremented identifier.
        name: Category name.
    """

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<CategoryModel(id={self.id}, name={self.name})>"

    def to_entity(self) -> Category:
        """Convert to domain entity."""
        return Category(id=self.id, name=self.name)


class ProductModel(Base):
    """Product row with its category links.

    Links are loaded eagerly with the product and are deleted together
    with it.

    Attributes:
        id: Auto-incremented identifier.
        name: Product name.
        category_links: Join rows to the product's categories.
    """

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    # Relationships
    category_links: Mapped[list["ProductCategoryModel"]] = relationship(
        "ProductCategoryModel",
        back_populates="product",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ProductCategoryModel.category_id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductModel(id={self.id}, name={self.name})>"

    def to_entity(self) -> Product:
        """Convert to domain entity."""
        # Links appended in this session keep insertion order until reloaded
        return Product(
            id=self.id,
            name=self.name,
            categories=[
                link.category.to_entity()
                for link in sorted(self.category_links, key=lambda link: link.category_id)
            ],
        )


class ProductCategoryModel(Base):
    """Join row between a product and a category.

    Attributes:
        product_id: Linked product.
        category_id: Linked category.
    """

    __tablename__ = "product_category"

    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("product.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("category.id"),
        primary_key=True,
        index=True,
    )

    # Relationships
    product: Mapped["ProductModel"] = relationship(
        "ProductModel", back_populates="category_links"
    )
    category: Mapped["CategoryModel"] = relationship("CategoryModel", lazy="selectin")

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<ProductCategoryModel(product_id={self.product_id}, "
            f"category_id={self.category_id})>"
        )
