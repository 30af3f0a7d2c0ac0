from .models import Article, ArticleUnit, Customer, Order, OrderLine

__all__ = ["Article", "ArticleUnit", "Customer", "Order", "OrderLine"]
