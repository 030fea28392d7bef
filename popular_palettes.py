"""Reference palettes that extracted palettes are compared against."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PopularPalette:
    id: str
    name: str
    colors: tuple  # hex strings
    category: str
    tags: tuple


POPULAR_PALETTES = (
    # Modern
    PopularPalette('modern-1', 'Midnight Slate', ('#0F172A', '#1E293B', '#334155', '#64748B', '#CBD5E1'), 'modern',
                   ('dark', 'professional', 'tech')),
    PopularPalette('modern-2', 'Ocean Breeze', ('#0EA5E9', '#06B6D4', '#22D3EE', '#67E8F9', '#A5F3FC'), 'modern',
                   ('blue', 'fresh', 'clean')),
    PopularPalette('modern-3', 'Neon Nights', ('#E879F9', '#C084FC', '#A78BFA', '#818CF8', '#60A5FA'), 'modern',
                   ('purple', 'gradient', 'vibrant')),
    PopularPalette('modern-4', 'Forest Mist', ('#065F46', '#047857', '#059669', '#10B981', '#34D399'), 'modern',
                   ('green', 'nature', 'calm')),
    PopularPalette('modern-5', 'Sunset Glow', ('#DC2626', '#EA580C', '#F59E0B', '#FBBF24', '#FDE047'), 'modern',
                   ('warm', 'gradient', 'energetic')),

    # Vintage
    PopularPalette('vintage-1', 'Retro Diner', ('#DC2626', '#FBBF24', '#0EA5E9', '#F8FAFC', '#1E293B'), 'vintage',
                   ('retro', 'classic', 'bold')),
    PopularPalette('vintage-2', 'Autumn Harvest', ('#78350F', '#92400E', '#B45309', '#D97706', '#F59E0B'), 'vintage',
                   ('brown', 'warm', 'rustic')),
    PopularPalette('vintage-3', 'Victorian Rose', ('#881337', '#9F1239', '#BE123C', '#E11D48', '#F43F5E'), 'vintage',
                   ('red', 'romantic', 'elegant')),
    PopularPalette('vintage-4', 'Olive Garden', ('#365314', '#3F6212', '#4D7C0F', '#65A30D', '#84CC16'), 'vintage',
                   ('green', 'muted', 'natural')),
    PopularPalette('vintage-5', 'Sepia Tones', ('#292524', '#44403C', '#78716C', '#A8A29E', '#D6D3D1'), 'vintage',
                   ('neutral', 'warm', 'classic')),

    # Pastel
    PopularPalette('pastel-1', 'Cotton Candy', ('#FECDD3', '#FBCFE8', '#DDD6FE', '#BFDBFE', '#BAE6FD'), 'pastel',
                   ('soft', 'playful', 'sweet')),
    PopularPalette('pastel-2', 'Spring Garden', ('#FEF08A', '#BEF264', '#86EFAC', '#6EE7B7', '#5EEAD4'), 'pastel',
                   ('spring', 'fresh', 'light')),
    PopularPalette('pastel-3', 'Lavender Dream', ('#E9D5FF', '#D8B4FE', '#C4B5FD', '#A78BFA', '#8B5CF6'), 'pastel',
                   ('purple', 'dreamy', 'soft')),
    PopularPalette('pastel-4', 'Peachy Keen', ('#FED7AA', '#FDBA74', '#FB923C', '#F97316', '#EA580C'), 'pastel',
                   ('orange', 'warm', 'friendly')),
    PopularPalette('pastel-5', 'Mint Cream', ('#ECFCCB', '#D9F99D', '#BEF264', '#A3E635', '#84CC16'), 'pastel',
                   ('green', 'fresh', 'light')),

    # Vibrant
    PopularPalette('vibrant-1', 'Electric Dreams', ('#EC4899', '#8B5CF6', '#3B82F6', '#06B6D4', '#10B981'), 'vibrant',
                   ('gradient', 'bold', 'modern')),
    PopularPalette('vibrant-2', 'Tropical Paradise', ('#F43F5E', '#F59E0B', '#84CC16', '#14B8A6', '#3B82F6'), 'vibrant',
                   ('rainbow', 'tropical', 'fun')),
    PopularPalette('vibrant-3', 'Cyber Punk', ('#F0ABFC', '#C084FC', '#A78BFA', '#818CF8', '#22D3EE'), 'vibrant',
                   ('neon', 'futuristic', 'bold')),
    PopularPalette('vibrant-4', 'Hot Sauce', ('#991B1B', '#DC2626', '#EF4444', '#F87171', '#FCA5A5'), 'vibrant',
                   ('red', 'intense', 'hot')),
    PopularPalette('vibrant-5', 'Lime Punch', ('#14532D', '#166534', '#16A34A', '#22C55E', '#4ADE80'), 'vibrant',
                   ('green', 'energetic', 'fresh')),

    # Dark
    PopularPalette('dark-1', 'Shadow Realm', ('#000000', '#18181B', '#27272A', '#3F3F46', '#52525B'), 'dark',
                   ('black', 'minimal', 'modern')),
    PopularPalette('dark-2', 'Deep Ocean', ('#0C4A6E', '#075985', '#0369A1', '#0284C7', '#0EA5E9'), 'dark',
                   ('blue', 'deep', 'professional')),
    PopularPalette('dark-3', 'Midnight Forest', ('#14532D', '#166534', '#15803D', '#16A34A', '#22C55E'), 'dark',
                   ('green', 'dark', 'nature')),
    PopularPalette('dark-4', 'Cosmic Purple', ('#3B0764', '#4C1D95', '#5B21B6', '#6D28D9', '#7C3AED'), 'dark',
                   ('purple', 'space', 'mystical')),
    PopularPalette('dark-5', 'Ember Glow', ('#431407', '#7C2D12', '#9A3412', '#C2410C', '#EA580C'), 'dark',
                   ('orange', 'warm', 'fire')),

    # Nature
    PopularPalette('nature-1', 'Earth Tones', ('#78350F', '#A16207', '#65A30D', '#0D9488', '#0891B2'), 'nature',
                   ('earth', 'organic', 'balanced')),
    PopularPalette('nature-2', 'Mountain Meadow', ('#065F46', '#047857', '#10B981', '#34D399', '#6EE7B7'), 'nature',
                   ('green', 'fresh', 'outdoor')),
    PopularPalette('nature-3', 'Desert Sand', ('#78350F', '#92400E', '#D97706', '#FBBF24', '#FDE047'), 'nature',
                   ('brown', 'yellow', 'warm')),
    PopularPalette('nature-4', 'Ocean Depths', ('#164E63', '#155E75', '#0E7490', '#0891B2', '#06B6D4'), 'nature',
                   ('blue', 'water', 'calm')),
    PopularPalette('nature-5', 'Sunset Valley', ('#BE185D', '#DB2777', '#F472B6', '#FDA4AF', '#FECDD3'), 'nature',
                   ('pink', 'sunset', 'romantic')),

    # Professional
    PopularPalette('professional-1', 'Corporate Blue', ('#1E3A8A', '#1E40AF', '#2563EB', '#3B82F6', '#60A5FA'), 'professional',
                   ('blue', 'trust', 'business')),
    PopularPalette('professional-2', 'Executive Suite', ('#1C1917', '#292524', '#44403C', '#78716C', '#A8A29E'), 'professional',
                   ('neutral', 'elegant', 'formal')),
    PopularPalette('professional-3', 'Financial Green', ('#14532D', '#166534', '#15803D', '#16A34A', '#22C55E'), 'professional',
                   ('green', 'money', 'growth')),
    PopularPalette('professional-4', 'Tech Innovation', ('#0C4A6E', '#1E40AF', '#7C3AED', '#06B6D4', '#10B981'), 'professional',
                   ('tech', 'modern', 'innovative')),
    PopularPalette('professional-5', 'Luxury Brand', ('#18181B', '#3F3F46', '#71717A', '#A1A1AA', '#E4E4E7'), 'professional',
                   ('luxury', 'minimalist', 'premium')),

    # Playful
    PopularPalette('playful-1', 'Bubble Gum', ('#FCE7F3', '#FBCFE8', '#F9A8D4', '#F472B6', '#EC4899'), 'playful',
                   ('pink', 'fun', 'sweet')),
    PopularPalette('playful-2', 'Candy Store', ('#FB7185', '#FB923C', '#FBBF24', '#A3E635', '#22D3EE'), 'playful',
                   ('rainbow', 'bright', 'happy')),
    PopularPalette('playful-3', 'Toy Box', ('#EF4444', '#F59E0B', '#EAB308', '#22C55E', '#3B82F6'), 'playful',
                   ('primary', 'children', 'fun')),
    PopularPalette('playful-4', 'Ice Cream', ('#FEF3C7', '#FED7AA', '#FECACA', '#DDD6FE', '#BAE6FD'), 'playful',
                   ('pastel', 'sweet', 'soft')),
    PopularPalette('playful-5', 'Party Time', ('#A855F7', '#EC4899', '#F43F5E', '#F59E0B', '#EAB308'), 'playful',
                   ('vibrant', 'celebration', 'energetic')),

    # Additional Modern Palettes
    PopularPalette('modern-6', 'Monochrome', ('#000000', '#404040', '#808080', '#C0C0C0', '#FFFFFF'), 'modern',
                   ('black', 'white', 'minimalist')),
    PopularPalette('modern-7', 'Nordic Snow', ('#ECFEFF', '#CFFAFE', '#A5F3FC', '#67E8F9', '#06B6D4'), 'modern',
                   ('blue', 'light', 'clean')),
    PopularPalette('modern-8', 'Rose Gold', ('#F4E4E8', '#E8C4D0', '#D494A7', '#C16481', '#B7385C'), 'modern',
                   ('pink', 'luxury', 'elegant')),

    # Additional Nature Palettes
    PopularPalette('nature-6', 'Cherry Blossom', ('#FEF2F2', '#FECDD3', '#FDA4AF', '#FB7185', '#F43F5E'), 'nature',
                   ('pink', 'spring', 'delicate')),
    PopularPalette('nature-7', 'Autumn Leaves', ('#7C2D12', '#9A3412', '#C2410C', '#EA580C', '#F97316'), 'nature',
                   ('orange', 'fall', 'warm')),
    PopularPalette('nature-8', 'Tropical Forest', ('#14532D', '#15803D', '#16A34A', '#4ADE80', '#86EFAC'), 'nature',
                   ('green', 'jungle', 'lush')),

    # Additional Professional Palettes
    PopularPalette('professional-6', 'Medical Blue', ('#F0F9FF', '#E0F2FE', '#7DD3FC', '#0EA5E9', '#0284C7'), 'professional',
                   ('blue', 'clean', 'medical')),
    PopularPalette('professional-7', 'Law & Order', ('#18181B', '#3F3F46', '#52525B', '#71717A', '#A1A1AA'), 'professional',
                   ('gray', 'serious', 'formal')),
    PopularPalette('professional-8', 'Banking Trust', ('#1E3A8A', '#1E40AF', '#3B82F6', '#60A5FA', '#93C5FD'), 'professional',
                   ('blue', 'trust', 'stable')),

    # Additional Vibrant Palettes
    PopularPalette('vibrant-6', 'Neon Rainbow', ('#FF0080', '#FF00FF', '#8000FF', '#0080FF', '#00FFFF'), 'vibrant',
                   ('neon', 'fluorescent', 'intense')),
    PopularPalette('vibrant-7', 'Fire & Ice', ('#DC2626', '#F97316', '#FBBF24', '#06B6D4', '#0EA5E9'), 'vibrant',
                   ('contrast', 'bold', 'dynamic')),
    PopularPalette('vibrant-8', 'Digital Art', ('#E11D48', '#F59E0B', '#84CC16', '#06B6D4', '#8B5CF6'), 'vibrant',
                   ('artistic', 'colorful', 'creative')),

    # Additional Dark Palettes
    PopularPalette('dark-6', 'Gothic Night', ('#450A0A', '#7F1D1D', '#991B1B', '#B91C1C', '#DC2626'), 'dark',
                   ('red', 'dark', 'dramatic')),
    PopularPalette('dark-7', 'Deep Space', ('#0C0A09', '#1C1917', '#292524', '#44403C', '#57534E'), 'dark',
                   ('black', 'space', 'minimal')),
    PopularPalette('dark-8', 'Navy Command', ('#082F49', '#0C4A6E', '#075985', '#0369A1', '#0284C7'), 'dark',
                   ('blue', 'navy', 'authority')),

    # Additional Pastel Palettes
    PopularPalette('pastel-6', 'Baby Shower', ('#FEF3C7', '#FCE7F3', '#DBEAFE', '#D1FAE5', '#F3E8FF'), 'pastel',
                   ('soft', 'baby', 'gentle')),
    PopularPalette('pastel-7', 'Macarons', ('#FCE7F3', '#FED7AA', '#FEF3C7', '#D9F99D', '#E0E7FF'), 'pastel',
                   ('sweet', 'delicate', 'french')),
    PopularPalette('pastel-8', 'Watercolor', ('#DBEAFE', '#E0E7FF', '#EDE9FE', '#FCE7F3', '#FEF2F2'), 'pastel',
                   ('soft', 'artistic', 'light')),

    # Additional Vintage Palettes
    PopularPalette('vintage-6', '70s Retro', ('#78350F', '#EA580C', '#EAB308', '#15803D', '#0E7490'), 'vintage',
                   ('70s', 'retro', 'groovy')),
    PopularPalette('vintage-7', 'Art Deco', ('#292524', '#78716C', '#D6D3D1', '#FBBF24', '#DC2626'), 'vintage',
                   ('20s', 'elegant', 'classic')),
    PopularPalette('vintage-8', 'Old Hollywood', ('#18181B', '#7F1D1D', '#B91C1C', '#FBBF24', '#F5F5F4'), 'vintage',
                   ('glamour', 'classic', 'luxurious')),

    # Additional Playful Palettes
    PopularPalette('playful-6', 'Circus', ('#DC2626', '#EAB308', '#3B82F6', '#EC4899', '#FFFFFF'), 'playful',
                   ('carnival', 'fun', 'bright')),
    PopularPalette('playful-7', 'Unicorn Magic', ('#FAE8FF', '#F0ABFC', '#E879F9', '#C084FC', '#A78BFA'), 'playful',
                   ('purple', 'pink', 'magical')),
    PopularPalette('playful-8', 'Lemonade Stand', ('#FEF9C3', '#FEF08A', '#FDE047', '#FACC15', '#EAB308'), 'playful',
                   ('yellow', 'cheerful', 'sunny')),
)


def palettes_by_category(category: str) -> list[PopularPalette]:
    return [p for p in POPULAR_PALETTES if p.category == category]


def palettes_by_tag(tag: str) -> list[PopularPalette]:
    return [p for p in POPULAR_PALETTES if tag.lower() in p.tags]


def search_palettes(query: str) -> list[PopularPalette]:
    """Palettes whose name or any tag contains query (case-insensitive)."""
    query = query.lower()
    return [
        p for p in POPULAR_PALETTES
        if query in p.name.lower() or any(query in tag for tag in p.tags)
    ]
